"""Tests for Pydantic schemas."""

import pytest
from pydantic import ValidationError

from schemas import (
    Article,
    BookState,
    Chapter,
    CommentBlock,
    CommentTag,
    DoxConfig,
    NavigationSegment,
    Summary,
)


class TestDoxConfig:
    """Tests for DoxConfig."""

    def test_defaults(self):
        """Only src is required."""
        config = DoxConfig(src="lib/**/*.js")

        assert config.output_dir == "dox"
        assert config.extension == ".md"
        assert config.concurrency == 16
        assert config.articles_policy == "replace"
        assert config.template_name == "api.md.j2"

    def test_src_required(self):
        with pytest.raises(ValidationError):
            DoxConfig()

    def test_blank_src_rejected(self):
        with pytest.raises(ValidationError):
            DoxConfig(src="  ")

    def test_extension_needs_dot(self):
        with pytest.raises(ValidationError):
            DoxConfig(src="*.js", extension="md")
        with pytest.raises(ValidationError):
            DoxConfig(src="*.js", extension=".")

    def test_concurrency_at_least_one(self):
        with pytest.raises(ValidationError):
            DoxConfig(src="*.js", concurrency=0)

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValidationError):
            DoxConfig(src="*.js", articles_policy="append")

    def test_unknown_options_ignored(self):
        """Options meant for other tools do not fail validation."""
        config = DoxConfig.model_validate({"src": "*.js", "theme": "dark"})
        assert not hasattr(config, "theme")


class TestCommentBlock:
    """Tests for comment schemas."""

    def test_defaults(self):
        block = CommentBlock()

        assert block.tags == []
        assert block.description.full == ""
        assert block.ctx is None
        assert block.is_private is False

    def test_tags_of(self):
        block = CommentBlock(
            tags=[
                CommentTag(type="param", name="a"),
                CommentTag(type="return"),
                CommentTag(type="param", name="b"),
            ]
        )
        assert [t.name for t in block.tags_of("param")] == ["a", "b"]
        assert block.tags_of("throws") == []

    def test_default_descriptions_are_independent(self):
        first, second = CommentBlock(), CommentBlock()
        first.description.full = "changed"
        assert second.description.full == ""


class TestBookState:
    """Tests for book metadata schemas."""

    def test_empty_state(self):
        state = BookState()

        assert state.summary.chapters == []
        assert state.navigation == {}

    def test_round_trip_json(self, sample_state):
        restored = BookState.model_validate_json(sample_state.model_dump_json())

        assert restored == sample_state
        assert restored.navigation["intro/setup.md"].prev == "README.md"

    def test_chapter_keeps_host_fields(self):
        """Fields owned by the host survive validation."""
        chapter = Chapter.model_validate({"level": "1", "title": "Intro", "depth": 1})
        assert chapter.model_dump()["depth"] == 1

    def test_article_defaults(self):
        article = Article(path="dox/a.md", level="2.1", title="a")

        assert article.articles == []
        assert article.exists is True
        assert article.external is False
        assert article.introduction is False

    def test_segment_requires_index(self):
        with pytest.raises(ValidationError):
            NavigationSegment(level="1", title="x", path="x.md")

    def test_summary_chapters_validated(self):
        summary = Summary.model_validate({"chapters": [{"level": "1", "articles": []}]})
        assert isinstance(summary.chapters[0], Chapter)

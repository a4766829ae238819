"""
Noteful Backend: Note Filter Builder Unit Tests
================================================

What:  The filter builder is pure; these tests compile its output for
       PostgreSQL and inspect the SQL and bound parameters.

What we test:
    ✅ No criteria → no WHERE clause, deterministic ordering
    ✅ Each criterion alone adds exactly its own clause
    ✅ All criteria together are ANDed
    ✅ LIKE wildcards in the search term are escaped
    ✅ No state shared between invocations
"""

import dataclasses
import warnings

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import SADeprecationWarning

from noteful.services.filters import (
    NoteFilter,
    build_note_criteria,
    build_notes_query,
    escape_like,
)

FOLDER_ID = "111111111111111111111103"
TAG_ID = "222222222222222222222200"


def _compiled(filters: NoteFilter):
    return build_notes_query(filters).compile(dialect=postgresql.dialect())


class TestBuildNoteCriteria:

    def test_empty_filter_has_no_criteria(self):
        assert build_note_criteria(NoteFilter()) == []

    def test_empty_strings_add_nothing(self):
        assert build_note_criteria(NoteFilter(search_term="", folder_id="", tag_id="")) == []

    def test_each_criterion_is_independent(self):
        assert len(build_note_criteria(NoteFilter(search_term="cats"))) == 1
        assert len(build_note_criteria(NoteFilter(folder_id=FOLDER_ID))) == 1
        assert len(build_note_criteria(NoteFilter(tag_id=TAG_ID))) == 1
        assert len(build_note_criteria(
            NoteFilter(search_term="cats", folder_id=FOLDER_ID, tag_id=TAG_ID)
        )) == 3

    def test_fresh_list_each_call(self):
        filters = NoteFilter(search_term="cats")
        first = build_note_criteria(filters)
        second = build_note_criteria(filters)
        assert first is not second
        first.append("leaked")
        assert len(build_note_criteria(filters)) == 1

    def test_filter_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            NoteFilter().search_term = "cats"


class TestBuildNotesQuery:

    def test_no_filters_lists_everything_newest_first(self):
        sql = str(_compiled(NoteFilter()))
        assert "WHERE" not in sql
        assert "ORDER BY notes.updated_at DESC, notes.id DESC" in sql

    def test_search_term_matches_title_or_content(self):
        compiled = _compiled(NoteFilter(search_term="Lady Gaga"))
        sql = str(compiled)
        assert "notes.title ILIKE" in sql
        assert "notes.content ILIKE" in sql
        assert " OR " in sql
        assert "%Lady Gaga%" in compiled.params.values()
        assert "folder_id =" not in sql
        assert "ANY" not in sql

    def test_folder_only(self):
        compiled = _compiled(NoteFilter(folder_id=FOLDER_ID))
        sql = str(compiled)
        assert "notes.folder_id = " in sql
        assert "ILIKE" not in sql
        assert "ANY" not in sql
        assert FOLDER_ID in compiled.params.values()

    def test_tag_is_a_membership_test(self):
        compiled = _compiled(NoteFilter(tag_id=TAG_ID))
        sql = str(compiled)
        assert "ANY (notes.tags)" in sql
        assert "notes.folder_id" not in sql.split("WHERE", 1)[1]
        assert TAG_ID in compiled.params.values()

    def test_tag_membership_uses_no_deprecated_operator(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", SADeprecationWarning)
            compiled = _compiled(NoteFilter(tag_id=TAG_ID))
        assert "= ANY (notes.tags)" in str(compiled)

    def test_all_criteria_are_anded(self):
        compiled = _compiled(NoteFilter(search_term="cats", folder_id=FOLDER_ID, tag_id=TAG_ID))
        where = str(compiled).split("WHERE", 1)[1]
        assert where.count(" AND ") == 2
        assert "ILIKE" in where
        assert "notes.folder_id = " in where
        assert "ANY (notes.tags)" in where


class TestEscapeLike:

    def test_plain_term_unchanged(self):
        assert escape_like("cats") == "cats"

    def test_wildcards_escaped(self):
        assert escape_like("50%_off") == "50\\%\\_off"

    def test_backslash_escaped_first(self):
        assert escape_like("a\\b") == "a\\\\b"

    def test_escaped_pattern_is_bound(self):
        compiled = _compiled(NoteFilter(search_term="100%"))
        assert "%100\\%%" in compiled.params.values()

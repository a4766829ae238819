"""
Noteful Backend: Seed Data Tests
=================================

What:  The fixed seed set must load cleanly into an empty schema.

What we test:
    ✅ Every id is a valid 24-hex identifier and ids are unique per table
    ✅ Folder and tag names are unique
    ✅ Note references point at seeded folders and tags
"""

from noteful.seed_data import FOLDERS, NOTES, TAGS
from noteful.validators import is_valid_id


class TestSeedData:

    def test_ids_valid_and_unique(self):
        for rows in (FOLDERS, TAGS, NOTES):
            ids = [row["id"] for row in rows]
            assert all(is_valid_id(i) for i in ids)
            assert len(set(ids)) == len(ids)

    def test_names_unique(self):
        for rows in (FOLDERS, TAGS):
            names = [row["name"] for row in rows]
            assert len(set(names)) == len(names)

    def test_references_resolve(self):
        folder_ids = {f["id"] for f in FOLDERS}
        tag_ids = {t["id"] for t in TAGS}

        for note in NOTES:
            assert note["title"]
            if note["folder_id"] is not None:
                assert note["folder_id"] in folder_ids
            for tag_id in note["tags"] or []:
                assert tag_id in tag_ids

    def test_covers_null_tags_and_null_folder(self):
        assert any(note["tags"] is None for note in NOTES)
        assert any(note["folder_id"] is None for note in NOTES)

from s3_links.domain.entities import FileEntry, FolderEntry, ObjectPrefix, ObjectSummary
from s3_links.domain.services import ListingBuilderService


def test_bucket_entries_are_folders():
    entries = ListingBuilderService().build_bucket_entries(["alpha", "beta"])
    assert entries == [FolderEntry("alpha", "alpha"), FolderEntry("beta", "beta")]


def test_folder_matching_prefix_is_skipped():
    entries = ListingBuilderService().build_level_entries(
        "bucket", "docs/", [ObjectPrefix("docs/")]
    )
    assert entries == []


def test_file_title_is_relative_to_prefix():
    entries = ListingBuilderService().build_level_entries(
        "bucket", "docs/", [ObjectSummary("docs/report.pdf", 10)]
    )
    assert entries == [FileEntry(title="report.pdf", size=10, source="bucket/docs/report.pdf")]


def test_folder_title_strips_trailing_slash_and_prefix():
    entries = ListingBuilderService().build_level_entries(
        "bucket", "docs/", [ObjectPrefix("docs/2020/")]
    )
    assert entries == [FolderEntry(title="2020", path="bucket/docs/2020/")]


def test_prefix_without_slash_hides_its_own_folder():
    entries = ListingBuilderService().build_level_entries(
        "bucket", "docs", [ObjectPrefix("docs/")]
    )
    assert entries == []


def test_no_prefix_keeps_full_names():
    entries = ListingBuilderService().build_level_entries(
        "bucket", "", [ObjectSummary("readme.md", 3), ObjectPrefix("docs/")]
    )
    assert entries == [
        FolderEntry(title="docs", path="bucket/docs/"),
        FileEntry(title="readme.md", size=3, source="bucket/readme.md"),
    ]


def test_numeric_titles_are_kept():
    entries = ListingBuilderService().build_level_entries(
        "bucket", "docs/", [ObjectSummary("docs/0", 1), ObjectPrefix("docs/0/")]
    )
    assert [entry.title for entry in entries] == ["0", "0"]


def test_folders_come_first_in_listing_order():
    items = [
        ObjectSummary("b.txt", 1),
        ObjectPrefix("z/"),
        ObjectSummary("a.txt", 1),
        ObjectPrefix("m/"),
    ]
    entries = ListingBuilderService().build_level_entries("bucket", "", items)
    assert [entry.title for entry in entries] == ["z", "m", "b.txt", "a.txt"]

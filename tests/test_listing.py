import os

import pytest

from listing import DirectoryReadError, Entry, Listing, count_children, read_listing, sort_dirs, sort_files


def names(entries):
    return [e.name for e in entries]


def test_hidden_entries_skipped_by_default(sample_tree):
    listing = read_listing(sample_tree)

    assert names(listing.dirs) == ["alpha", "Beta"]
    assert names(listing.files) == ["big.bin", "small.txt"]
    assert not listing.is_empty


def test_show_all_includes_hidden_entries(sample_tree):
    listing = read_listing(sample_tree, show_all=True)

    assert names(listing.dirs) == [".git", "alpha", "Beta"]
    assert names(listing.files) == ["big.bin", "small.txt", ".env"]
    assert listing.files[-1].hidden
    assert listing.dirs[0].hidden


def test_child_counts_follow_show_all(sample_tree):
    alpha = read_listing(sample_tree).dirs[0]
    assert (alpha.sub_dirs, alpha.sub_files) == (1, 1)

    alpha = read_listing(sample_tree, show_all=True).dirs[1]
    assert alpha.name == "alpha"
    assert (alpha.sub_dirs, alpha.sub_files) == (1, 2)

    beta = read_listing(sample_tree).dirs[1]
    assert (beta.sub_dirs, beta.sub_files) == (0, 0)


def test_files_only_drops_directories(sample_tree):
    listing = read_listing(sample_tree, files_only=True)

    assert listing.dirs == []
    assert names(listing.files) == ["big.bin", "small.txt"]
    assert listing.files_only


def test_entry_fields(sample_tree):
    listing = read_listing(sample_tree)
    big = listing.files[0]

    assert big.size == 2048
    assert big.extension == "bin"
    assert not big.is_dir
    assert not big.is_symlink
    assert listing.dirs[0].extension == ""


def test_empty_directory(tmp_path):
    listing = read_listing(tmp_path)

    assert listing.is_empty
    assert listing.content_lines == 0


def test_hidden_only_directory_is_empty_without_show_all(tmp_path):
    (tmp_path / ".only").write_text("x")

    assert read_listing(tmp_path).is_empty
    assert not read_listing(tmp_path, show_all=True).is_empty


def test_missing_target_raises(tmp_path):
    missing = tmp_path / "missing"

    with pytest.raises(DirectoryReadError) as excinfo:
        read_listing(missing)

    assert excinfo.value.target == str(missing)
    assert isinstance(excinfo.value.error, FileNotFoundError)
    assert str(missing) in str(excinfo.value)


def test_file_target_raises(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text("x")

    with pytest.raises(DirectoryReadError):
        read_listing(path)


def test_symlinks_are_classified_by_target(sample_tree):
    try:
        os.symlink(sample_tree / "alpha", sample_tree / "linked")
        os.symlink(sample_tree / "nowhere", sample_tree / "broken")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")

    listing = read_listing(sample_tree)
    linked = next(e for e in listing.dirs if e.name == "linked")
    broken = next(e for e in listing.files if e.name == "broken")

    assert linked.is_symlink and linked.is_dir
    assert (linked.sub_dirs, linked.sub_files) == (1, 1)
    assert broken.is_symlink and not broken.is_dir


def test_count_children_of_unreadable_path(tmp_path):
    assert count_children(tmp_path / "missing") == (0, 0)


def test_sort_files_by_size_then_name():
    entries = [Entry("b", size=3), Entry("A", size=3), Entry("z", size=100), Entry("c", size=0)]

    assert names(sort_files(entries)) == ["z", "A", "b", "c"]


def test_sort_dirs_ignores_case():
    entries = [Entry("beta", is_dir=True), Entry("Alpha", is_dir=True), Entry("gamma", is_dir=True)]

    assert names(sort_dirs(entries)) == ["Alpha", "beta", "gamma"]


def test_content_lines_uses_taller_panel():
    listing = Listing(target=".", dirs=[Entry("d", is_dir=True)] * 2, files=[Entry("f")] * 3)

    assert listing.content_lines == 6

import pytest

from librarydesk.members import HistoryEntry, Member, MemberDirectory, read_history


def _member(member_id, first="Ann", last="Lee"):
    return Member(member_id, first, last, "0000", "ann@example.com")


def test_insert_and_find():
    directory = MemberDirectory()
    member = _member("M002")
    assert directory.insert(member) is True
    assert directory.find("M002") is member
    assert directory.find("M999") is None


def test_duplicate_id_is_ignored():
    directory = MemberDirectory()
    directory.insert(_member("M001", first="First"))
    assert directory.insert(_member("M001", first="Second")) is False
    assert len(directory) == 1
    assert directory.find("M001").first_name == "First"


def test_iteration_is_sorted_by_id():
    directory = MemberDirectory()
    for member_id in ["M005", "M001", "M003"]:
        directory.insert(_member(member_id))
    assert [m.id for m in directory] == ["M001", "M003", "M005"]


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "member.csv"
    directory = MemberDirectory()
    directory.insert(Member("B2", "Bob", "Stone", "1111", "bob@example.com"))
    directory.insert(Member("A1", "Amy", "Ray", "2222", "amy@example.com"))
    directory.save(path)

    loaded = MemberDirectory()
    assert loaded.load(path) == 2
    assert list(loaded) == list(directory)
    assert path.read_text().splitlines()[0] == "ID,FirstName,LastName,Phone,Email"


def test_save_empty_directory_writes_nothing(tmp_path):
    path = tmp_path / "member.csv"
    MemberDirectory().save(path)
    assert not path.exists()


def test_load_skips_bad_and_blank_lines(tmp_path):
    path = tmp_path / "member.csv"
    path.write_text(
        "ID,FirstName,LastName,Phone,Email\n"
        "A1,Amy,Ray,2222,amy@example.com  \n"
        "\n"
        "B2,Bob,,1111,bob@example.com\n"
        "C3,Cid\n"
    )
    directory = MemberDirectory()
    assert directory.load(path) == 1
    assert [m.id for m in directory] == ["A1"]
    assert directory.find("A1").email == "amy@example.com"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MemberDirectory().load(tmp_path / "absent.csv")


def test_read_history_filters_by_member(tmp_path):
    path = tmp_path / "borrow_history.csv"
    path.write_text(
        "Member_ID,Book_ID,Title,Status\n"
        "A1,FT01-00001-2014,Dune,Borrowed\n"
        "B2,HT02-00001-1990,Rome,Returned\n"
        "A1,SC03-00002-2001,Cosmos,Returned\n"
    )
    entries = read_history(path, "A1")
    assert entries == [
        HistoryEntry("A1", "FT01-00001-2014", "Dune", "Borrowed"),
        HistoryEntry("A1", "SC03-00002-2001", "Cosmos", "Returned"),
    ]
    assert read_history(path, "Z9") == []


def test_read_history_skips_header_line(tmp_path):
    path = tmp_path / "borrow_history.csv"
    path.write_text("A1,X,T,Borrowed\nA1,Y,U,Returned\n")
    assert [e.book_id for e in read_history(path, "A1")] == ["Y"]
import pytest

from shelfkeys.books import BookView
from shelfkeys.text_objects import TextObjectKind, get_text_object_range


def make_books():
    books = []
    for i in range(1, 11):
        books.append(
            BookView(
                id=f"id{i}",
                title=f"Book {i}",
                authors=[f"Author {(i - 1) // 3 + 1}"],
                tags=[f"tag{i % 3}"],
                year=2020 + (i % 5),
            )
        )
    return books


@pytest.fixture
def books():
    return make_books()


def test_book_object_is_current(books):
    assert get_text_object_range(books, 4, "b", TextObjectKind.INNER) == [4]


def test_author_object(books):
    assert get_text_object_range(books, 0, "a", TextObjectKind.INNER) == [0, 1, 2]


def test_author_object_covers_exactly_same_author(books):
    result = get_text_object_range(books, 5, "a", TextObjectKind.AROUND)
    primary = books[5].authors[0]
    assert 5 in result
    for i, book in enumerate(books):
        assert (i in result) == (primary in book.authors)


def test_author_object_without_authors(books):
    books[0].authors = []
    assert get_text_object_range(books, 0, "a", TextObjectKind.INNER) is None


def test_tag_inner_equals_around_for_single_tags(books):
    inner = get_text_object_range(books, 2, "t", TextObjectKind.INNER)
    around = get_text_object_range(books, 2, "t", TextObjectKind.AROUND)
    assert inner == around
    assert all(books[2].tags[0] in books[i].tags for i in inner)


def test_tag_inner_requires_all_tags(books):
    books[0].tags = ["tag1", "extra"]
    inner = get_text_object_range(books, 0, "t", TextObjectKind.INNER)
    around = get_text_object_range(books, 0, "t", TextObjectKind.AROUND)
    assert inner == [0]
    assert set(inner) < set(around)


def test_tag_object_without_tags(books):
    books[3].tags = []
    assert get_text_object_range(books, 3, "t", TextObjectKind.AROUND) is None


@pytest.mark.parametrize("kind", list(TextObjectKind))
def test_folder_object_is_whole_view(books, kind):
    assert get_text_object_range(books, 7, "f", kind) == list(range(len(books)))


def test_year_object(books):
    result = get_text_object_range(books, 0, "y", TextObjectKind.INNER)
    assert 0 in result
    assert all(books[i].year == books[0].year for i in result)
    assert all(books[i].year != books[0].year for i in range(len(books)) if i not in result)


def test_library_object(books):
    libraries = {"id1": ["fiction"], "id3": ["fiction", "old"], "id4": ["science"]}
    result = get_text_object_range(
        books, 0, "l", TextObjectKind.INNER, lambda b: libraries.get(b.id, [])
    )
    assert result == [0, 2]


def test_library_object_skips_unloadable_cards(books):
    libraries = {"id1": ["fiction"]}

    def lookup(book):
        return libraries.get(book.id)

    assert get_text_object_range(books, 0, "l", TextObjectKind.INNER, lookup) == [0]


def test_library_object_without_library(books):
    assert get_text_object_range(books, 0, "l", TextObjectKind.INNER, lambda b: []) is None
    assert get_text_object_range(books, 0, "l", TextObjectKind.INNER) is None


def test_unknown_object(books):
    assert get_text_object_range(books, 0, "q", TextObjectKind.INNER) is None


def test_current_out_of_range(books):
    assert get_text_object_range(books, len(books), "b", TextObjectKind.INNER) is None
    assert get_text_object_range([], 0, "f", TextObjectKind.INNER) is None
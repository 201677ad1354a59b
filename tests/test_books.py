from shelfkeys.books import BookView


def test_search_text_joins_title_authors_tags():
    book = BookView(
        id="1", title="Dune", authors=["Frank Herbert"], tags=["scifi", "classic"]
    )
    assert book.search_text() == "Dune Frank Herbert scifi classic"


def test_search_text_contains_every_part():
    book = BookView(id="2", title="Book 3", authors=["A", "B"], tags=["t1"])
    text = book.search_text()
    assert text.startswith("Book 3 ")
    assert "A B" in text
    assert text.endswith("t1")


def test_search_text_without_authors_or_tags_starts_with_title():
    book = BookView(id="3", title="Lonely")
    assert book.search_text().strip() == "Lonely"


def test_defaults_are_independent():
    first = BookView(id="a", title="x")
    second = BookView(id="b", title="y")
    first.tags.append("shared")
    assert second.tags == []
    assert first.year is None
    assert first.read_status == "unread"


def test_equality_by_value():
    assert BookView(id="a", title="x", year=2020) == BookView(id="a", title="x", year=2020)
    assert BookView(id="a", title="x", year=2020) != BookView(id="a", title="x", year=2021)
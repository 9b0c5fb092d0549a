"""Normalizador: BookResponse -> Book."""

import json

import pytest
from pydantic import ValidationError

from helpers import HAMLET, MACBETH
from core.domain.models import Book, BookResponse
from core.services.book_normalizer import (
    MalformedResponseError,
    normalize_book,
    normalize_books,
    normalize_books_json,
    parse_book_response,
)


class TestNormalizeBook:
    def test_hamlet_flattens_exactly(self):
        """El registro anidado se aplana en los cinco campos."""
        book = normalize_book(BookResponse.model_validate(HAMLET))

        assert book.model_dump() == {
            "title": "Hamlet",
            "author": "Shakespeare",
            "isbn": "111",
            "quantity": 5,
            "price": 9.99,
        }

    def test_values_pass_through_unchanged(self):
        book = normalize_book(BookResponse.model_validate(MACBETH))
        assert book.quantity == 0
        assert book.price == 7.5

    def test_book_is_immutable(self):
        book = normalize_book(BookResponse.model_validate(HAMLET))
        with pytest.raises(ValidationError):
            book.title = "Othello"

    def test_books_compare_by_fields(self):
        a = normalize_book(BookResponse.model_validate(HAMLET))
        b = Book(title="Hamlet", author="Shakespeare", isbn="111", quantity=5, price=9.99)
        assert a == b


class TestParseBookResponse:
    def test_extra_keys_are_ignored(self):
        raw = {**HAMLET, "publisher": "Globe"}
        assert parse_book_response(raw).book.title == "Hamlet"

    def test_xml_numeric_text_is_coerced(self):
        """El grafo del XML trae todo como texto; esta ruta lo convierte."""
        raw = {
            "book": {"title": "Hamlet", "author": "Shakespeare", "isbn": "111"},
            "stock": {"quantity": "5", "price": "9.99"},
        }
        response = parse_book_response(raw)
        assert response.stock.quantity == 5
        assert response.stock.price == 9.99

    def test_missing_stock_is_explicit_error(self):
        """Sin `stock` no se produce un Book con campos vacíos."""
        raw = {"book": HAMLET["book"]}
        with pytest.raises(MalformedResponseError) as excinfo:
            parse_book_response(raw)
        assert isinstance(excinfo.value.__cause__, ValidationError)

    def test_negative_quantity_rejected(self):
        raw = {"book": HAMLET["book"], "stock": {"quantity": -1, "price": 1.0}}
        with pytest.raises(MalformedResponseError):
            parse_book_response(raw)

    def test_malformed_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_book_response("not an object")


class TestNormalizeBooks:
    def test_order_is_preserved(self):
        books = normalize_books([MACBETH, HAMLET])
        assert [b.title for b in books] == ["Macbeth", "Hamlet"]

    def test_empty_list(self):
        assert normalize_books([]) == []

    def test_non_list_payload_rejected(self):
        with pytest.raises(MalformedResponseError):
            normalize_books({"books": [HAMLET]})


class TestNormalizeBooksJson:
    def test_values_pass_through(self):
        books = normalize_books_json(json.dumps([HAMLET, MACBETH]))
        assert [b.model_dump() for b in books] == [
            {"title": "Hamlet", "author": "Shakespeare", "isbn": "111", "quantity": 5, "price": 9.99},
            {"title": "Macbeth", "author": "Shakespeare", "isbn": "222", "quantity": 0, "price": 7.5},
        ]

    def test_integer_price_is_accepted(self):
        raw = {"book": HAMLET["book"], "stock": {"quantity": 1, "price": 10}}
        assert normalize_books_json(json.dumps([raw]))[0].price == 10

    @pytest.mark.parametrize(
        "stock",
        [
            {"quantity": "5", "price": 9.99},
            {"quantity": 5, "price": "9.99"},
            {"quantity": True, "price": 9.99},
            {"quantity": 5, "price": True},
        ],
    )
    def test_no_coercion_of_stock_values(self, stock):
        """Strings o booleanos en `stock` no se convierten a números."""
        raw = {"book": HAMLET["book"], "stock": stock}
        with pytest.raises(MalformedResponseError):
            normalize_books_json(json.dumps([raw]))

    def test_numeric_isbn_is_not_stringified(self):
        raw = {"book": {**HAMLET["book"], "isbn": 111}, "stock": HAMLET["stock"]}
        with pytest.raises(MalformedResponseError):
            normalize_books_json(json.dumps([raw]))

    def test_invalid_json_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            normalize_books_json(b"not json")

    def test_object_body_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            normalize_books_json(json.dumps({"books": [HAMLET]}))

"""Tests for the @inherits directive and the inheritance resolver."""

import pytest
from graphql import build_schema, validate_schema

from schema_directives.core.errors import (
    InheritanceCycleError,
    InvalidInheritableTypeError,
    TypeNotFoundError,
    TypeReferenceError,
)
from schema_directives.directives.inherits import inherit_fields, inherits_directive

from .conftest import BOOK_SDL, execute, registry_with


def build(sdl: str):
    return registry_with(inherits_directive()).build_schema(sdl)


def field_types(type_) -> dict[str, str]:
    return {name: str(field.type) for name, field in type_.fields.items()}


class TestInheritsDirective:
    def test_type_defs(self) -> None:
        assert inherits_directive().type_defs == (
            "directive @inherits(types: [String!]!) on OBJECT | INPUT_OBJECT | INTERFACE"
        )

    def test_inherited_fields_are_appended(self) -> None:
        book = build(BOOK_SDL).get_type("Book")
        assert list(book.fields) == ["publisher", "publisherID", "id", "createdAt", "updatedAt"]
        assert field_types(book) == {
            "publisher": "String!",
            "publisherID": "Int!",
            "id": "ID!",
            "createdAt": "String!",
            "updatedAt": "String",
        }

    def test_inherited_fields_resolve(self) -> None:
        schema = build(BOOK_SDL)
        result = execute(
            schema,
            "{ book { id publisher createdAt } }",
            {"book": {"id": "b1", "publisher": "Chilton", "createdAt": "1965"}},
        )
        assert result.errors is None
        assert result.data == {"book": {"id": "b1", "publisher": "Chilton", "createdAt": "1965"}}

    def test_fields_are_copied(self) -> None:
        source = build_schema(inherits_directive().type_defs + BOOK_SDL)
        schema = inherits_directive().transform(source)
        model = source.get_type("Model")
        assert schema.get_type("Book").fields["id"] is not model.fields["id"]
        assert list(model.fields) == ["id", "createdAt", "updatedAt"]
        assert list(source.get_type("Book").fields) == ["publisher", "publisherID"]

    def test_receiver_attributes_preserved(self) -> None:
        schema = build('''
            interface Node { id: ID! }
            type Model { id: ID! }
            """A book"""
            type Book implements Node @inherits(types: ["Model"]) { title: String }
            type Query { book: Book }
        ''')
        book = schema.get_type("Book")
        assert book.description == "A book"
        assert [i.name for i in book.interfaces] == ["Node"]
        assert validate_schema(schema) == []

    def test_later_sources_win(self) -> None:
        schema = build("""
            type A { name: String, a: Int }
            type B { name: Int, b: Int }
            type C @inherits(types: ["A", "B"]) { c: Int }
            type Query { c: C }
        """)
        c = schema.get_type("C")
        assert list(c.fields) == ["c", "name", "a", "b"]
        assert str(c.fields["name"].type) == "Int"

    def test_inherited_field_overrides_receiver_in_place(self) -> None:
        schema = build("""
            type Model { id: ID! }
            type Book @inherits(types: ["Model"]) { id: String, title: String }
            type Query { book: Book }
        """)
        book = schema.get_type("Book")
        assert list(book.fields) == ["id", "title"]
        assert str(book.fields["id"].type) == "ID!"

    def test_inheritance_is_transitive(self) -> None:
        schema = build("""
            type Base { id: ID! }
            type Model @inherits(types: ["Base"]) { createdAt: String }
            type Book @inherits(types: ["Model"]) { title: String }
            type Query { book: Book }
        """)
        assert list(schema.get_type("Book").fields) == ["title", "createdAt", "id"]
        assert list(schema.get_type("Model").fields) == ["createdAt", "id"]

    def test_input_types(self) -> None:
        schema = build("""
            input ModelInput { id: ID! }
            input BookInput @inherits(types: ["ModelInput"]) { title: String }
            type Query { book(input: BookInput): String }
        """)
        assert field_types(schema.get_type("BookInput")) == {"title": "String", "id": "ID!"}

    def test_interface_types(self) -> None:
        schema = build("""
            interface Timestamped { createdAt: String }
            interface Node @inherits(types: ["Timestamped"]) { id: ID! }
            type Query { node: Node }
        """)
        assert list(schema.get_type("Node").fields) == ["id", "createdAt"]

    def test_object_may_inherit_interface(self) -> None:
        schema = build("""
            interface Node { id: ID! }
            type Book @inherits(types: ["Node"]) { title: String }
            type Query { book: Book }
        """)
        assert list(schema.get_type("Book").fields) == ["title", "id"]

    def test_missing_type(self) -> None:
        with pytest.raises(TypeNotFoundError) as exc:
            build("""
                type Book @inherits(types: ["Missing"]) { title: String }
                type Query { book: Book }
            """)
        assert exc.value.type_name == "Missing"
        assert exc.value.receiver == "Book"
        assert "'Missing'" in str(exc.value)
        assert "'Book'" in str(exc.value)

    def test_non_inheritable_kind(self) -> None:
        with pytest.raises(InvalidInheritableTypeError, match="'Genre' is not a valid inheritable type"):
            build("""
                enum Genre { FICTION }
                type Book @inherits(types: ["Genre"]) { title: String }
                type Query { book: Book }
            """)

    def test_input_cannot_inherit_object(self) -> None:
        with pytest.raises(InvalidInheritableTypeError, match="input and output"):
            build("""
                type Model { id: ID! }
                input BookInput @inherits(types: ["Model"]) { title: String }
                type Query { book(input: BookInput): String }
            """)

    def test_cycle_is_rejected(self) -> None:
        with pytest.raises(InheritanceCycleError) as exc:
            build("""
                type A @inherits(types: ["B"]) { a: Int }
                type B @inherits(types: ["A"]) { b: Int }
                type Query { a: A }
            """)
        assert exc.value.chain in (["A", "B", "A"], ["B", "A", "B"])

    def test_self_inheritance_is_rejected(self) -> None:
        with pytest.raises(InheritanceCycleError, match="A -> A"):
            build("""
                type A @inherits(types: ["A"]) { a: Int }
                type Query { a: A }
            """)

    def test_reference_errors_share_a_base(self) -> None:
        assert issubclass(TypeNotFoundError, TypeReferenceError)
        assert issubclass(InheritanceCycleError, TypeReferenceError)


class TestInheritFields:
    def test_copies_declared_fields(self) -> None:
        schema = build_schema(BOOK_SDL.replace('@inherits(types: ["Model"])', ""))
        book = inherit_fields(schema.get_type("Book"), ["Model"], schema)
        assert list(book.fields) == ["publisher", "publisherID", "id", "createdAt", "updatedAt"]
        assert book is not schema.get_type("Book")
        assert list(schema.get_type("Book").fields) == ["publisher", "publisherID"]

    def test_missing_source(self) -> None:
        schema = build_schema("type Query { a: Int }")
        with pytest.raises(TypeNotFoundError):
            inherit_fields(schema.query_type, ["Nope"], schema)

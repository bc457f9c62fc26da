"""Tests for date mask formatting and the @date directive."""

from datetime import date, datetime, timedelta, timezone

import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from schema_directives.core.defs import DEFAULT_DATE_FORMAT
from schema_directives.core.errors import DirectiveConfigError, FieldValueError
from schema_directives.directives.date import date_directive, format_date

from .conftest import execute, registry_with


MOMENT = datetime(2022, 3, 5, 14, 7, 9, 250000, tzinfo=timezone.utc)

SDL = """
    scalar Date

    type Book {
        title: String
        publishDate: Date! @date
        printedAt: Date @date(defaultFormat: "d mmm yyyy")
    }

    type Query {
        book: Book
    }
"""

ROOT = {"book": {"title": "Dune", "publishDate": "2022-03-05", "printedAt": "2021-12-24T10:00:00Z"}}


class TestFormatDate:
    def test_default_format(self) -> None:
        assert DEFAULT_DATE_FORMAT == "mmmm d, yyyy"
        assert format_date(MOMENT) == "March 5, 2022"

    def test_day_and_month_tokens(self) -> None:
        assert format_date(MOMENT, "d dd ddd dddd") == "5 05 Sat Saturday"
        assert format_date(MOMENT, "m mm mmm mmmm") == "3 03 Mar March"
        assert format_date(MOMENT, "yy yyyy") == "22 2022"

    def test_time_tokens(self) -> None:
        assert format_date(MOMENT, "h:MM:ss TT") == "2:07:09 PM"
        assert format_date(MOMENT, "HH:MM:ss.l") == "14:07:09.250"
        assert format_date(MOMENT, "hh tt T t L") == "02 pm P p 25"

    def test_ordinal_suffix(self) -> None:
        assert format_date(MOMENT, "dS") == "5th"
        assert format_date(datetime(2022, 3, 1), "dS") == "1st"
        assert format_date(datetime(2022, 3, 12), "dS") == "12th"
        assert format_date(datetime(2022, 3, 22), "dS") == "22nd"

    def test_literals(self) -> None:
        assert format_date(MOMENT, "'Day' d") == "Day 5"
        assert format_date(MOMENT, 'yyyy"-Q1"') == "2022-Q1"

    def test_named_masks(self) -> None:
        assert format_date(MOMENT, "isoDate") == "2022-03-05"
        assert format_date(MOMENT, "isoUtcDateTime") == "2022-03-05T14:07:09Z"
        assert format_date(MOMENT, "fullDate") == "Saturday, March 5, 2022"

    def test_converts_to_utc(self) -> None:
        local = datetime(2022, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_date(local, "yyyy-mm-dd HH:MM") == "2021-12-31 23:00"

    def test_accepts_date_and_iso_strings(self) -> None:
        assert format_date(date(2020, 2, 29), "isoDate") == "2020-02-29"
        assert format_date("2021-12-24T10:00:00Z", "mmm d HH") == "Dec 24 10"

    def test_invalid_string(self) -> None:
        with pytest.raises(FieldValueError, match="Invalid date"):
            format_date("not a date")


class TestDateDirective:
    @pytest.fixture
    def schema(self):
        return registry_with(date_directive()).build_schema(SDL)

    def test_type_defs(self) -> None:
        assert date_directive().type_defs == (
            'directive @date(defaultFormat: String = "mmmm d, yyyy") on FIELD_DEFINITION'
        )
        assert date_directive("when", 'd "of" mmmm').type_defs == (
            'directive @when(defaultFormat: String = "d \\"of\\" mmmm") on FIELD_DEFINITION'
        )

    def test_field_is_rewritten(self, schema) -> None:
        field = schema.get_type("Book").fields["publishDate"]
        assert field.type is GraphQLString
        assert "format" in field.args

    def test_uses_default_format(self, schema) -> None:
        result = execute(schema, "{ book { publishDate } }", ROOT)
        assert result.errors is None
        assert result.data == {"book": {"publishDate": "March 5, 2022"}}

    def test_directive_default_format(self, schema) -> None:
        result = execute(schema, "{ book { printedAt } }", ROOT)
        assert result.data == {"book": {"printedAt": "24 Dec 2021"}}

    def test_format_argument_overrides(self, schema) -> None:
        result = execute(
            schema,
            '{ book { a: publishDate(format: "yyyy") b: printedAt(format: "isoDate") } }',
            ROOT,
        )
        assert result.data == {"book": {"a": "2022", "b": "2021-12-24"}}

    def test_definition_default_format(self) -> None:
        schema = registry_with(date_directive(default_format="dd/mm/yyyy")).build_schema(SDL)
        result = execute(schema, "{ book { publishDate } }", ROOT)
        assert result.data == {"book": {"publishDate": "05/03/2022"}}

    def test_datetime_values(self, schema) -> None:
        result = execute(schema, "{ book { publishDate } }", {"book": {"publishDate": MOMENT}})
        assert result.data == {"book": {"publishDate": "March 5, 2022"}}

    def test_null_passes_through(self, schema) -> None:
        result = execute(schema, "{ book { printedAt } }", {"book": {"printedAt": None}})
        assert result.errors is None
        assert result.data == {"book": {"printedAt": None}}

    def test_invalid_value_is_a_field_error(self, schema) -> None:
        result = execute(schema, "{ book { printedAt title } }", {"book": {"printedAt": "soon", "title": "Dune"}})
        assert result.data == {"book": {"printedAt": None, "title": "Dune"}}
        assert result.errors[0].message == "Invalid date: 'soon'"

    def test_original_arguments_are_kept(self) -> None:
        schema = registry_with(date_directive()).build_schema(
            "type Query { released(region: String): String @date }"
        )
        args = schema.query_type.fields["released"].args
        assert list(args) == ["region", "format"]

    def test_input_field_is_config_error(self) -> None:
        book_input = GraphQLInputObjectType(
            "BookInput",
            {"published": GraphQLInputField(GraphQLString, extensions={"directives": {"date": {}}})},
        )
        query = GraphQLObjectType(
            "Query",
            {"add": GraphQLField(GraphQLString, args={"input": GraphQLArgument(book_input)})},
        )
        with pytest.raises(DirectiveConfigError, match="BookInput.published"):
            date_directive().transform(GraphQLSchema(query=query))

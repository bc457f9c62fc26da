"""
@date - format a resolved date as a string.

    scalar Date

    type Book {
        publishDate: Date! @date
    }

    query {
        books { publishDate(format: "d mmm yyyy") }
    }

The field gains a ``format: String`` argument and its type becomes String.
The format used is, in order: the ``format`` argument of the query, the
``defaultFormat`` argument of the directive, DEFAULT_DATE_FORMAT.

Formats are dateformat-style masks, rendered in UTC:

    d dd ddd dddd      day (1, 01, Mon, Monday)
    m mm mmm mmmm      month (1, 01, Jan, January)
    yy yyyy            year
    h hh H HH          hours (12h / 24h)
    M MM s ss l L      minutes, seconds, milliseconds, centiseconds
    t tt T TT          am/pm markers
    Z o p S W WW N     zone, offsets, ordinal suffix, ISO week, ISO weekday
    'text' "text"      literals

Named masks (``isoDate``, ``longDate``, ...) are accepted as well.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timezone
from typing import Any, Optional

from graphql import GraphQLArgument, GraphQLField, GraphQLInputField, GraphQLObjectType, GraphQLString

from schema_directives.core.defs import DEFAULT_DATE_FORMAT, FIELD_LOCATIONS, DateArgs, DirectiveKind
from schema_directives.core.errors import DirectiveConfigError, FieldValueError
from schema_directives.core.resolvers import wrap_resolver

from .base import DirectiveDefinition

logger = logging.getLogger(__name__)


FORMAT_ARG = "format"

NAMED_MASKS = {
    "default": "ddd mmm dd yyyy HH:MM:ss",
    "shortDate": "m/d/yy",
    "paddedShortDate": "mm/dd/yyyy",
    "mediumDate": "mmm d, yyyy",
    "longDate": "mmmm d, yyyy",
    "fullDate": "dddd, mmmm d, yyyy",
    "shortTime": "h:MM TT",
    "mediumTime": "h:MM:ss TT",
    "longTime": "h:MM:ss TT Z",
    "isoDate": "yyyy-mm-dd",
    "isoTime": "HH:MM:ss",
    "isoDateTime": "yyyy-mm-dd'T'HH:MM:sso",
    "isoUtcDateTime": "yyyy-mm-dd'T'HH:MM:ss'Z'",
    "expiresHeaderFormat": "ddd, dd mmm yyyy HH:MM:ss Z",
}

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_TOKEN_PATTERN = re.compile(r"d{1,4}|m{1,4}|yy(?:yy)?|([HhMsTt])\1?|W{1,2}|[LlopSZN]|\"[^\"]*\"|'[^']*'")


# =============================================================================
# Formatting
# =============================================================================


def to_utc_datetime(value: Any) -> datetime:
    """
    Coerce a resolved value into an aware UTC datetime.

    Naive datetimes are taken to be UTC already.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value)
        except ValueError:
            raise FieldValueError(f"Invalid date: {value!r}") from None
    else:
        raise FieldValueError(f"Invalid date: {value!r}")

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _ordinal_suffix(day: int) -> str:
    if 10 < day % 100 < 14:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_date(value: Any, mask: str = DEFAULT_DATE_FORMAT) -> str:
    """Render ``value`` in UTC using a dateformat-style ``mask``."""
    moment = to_utc_datetime(value)
    mask = NAMED_MASKS.get(mask, mask)
    hour12 = moment.hour % 12 or 12
    am = moment.hour < 12

    tokens = {
        "d": str(moment.day),
        "dd": f"{moment.day:02d}",
        "ddd": DAY_NAMES[moment.weekday()][:3],
        "dddd": DAY_NAMES[moment.weekday()],
        "m": str(moment.month),
        "mm": f"{moment.month:02d}",
        "mmm": MONTH_NAMES[moment.month - 1][:3],
        "mmmm": MONTH_NAMES[moment.month - 1],
        "yy": f"{moment.year % 100:02d}",
        "yyyy": f"{moment.year:04d}",
        "h": str(hour12),
        "hh": f"{hour12:02d}",
        "H": str(moment.hour),
        "HH": f"{moment.hour:02d}",
        "M": str(moment.minute),
        "MM": f"{moment.minute:02d}",
        "s": str(moment.second),
        "ss": f"{moment.second:02d}",
        "l": f"{moment.microsecond // 1000:03d}",
        "L": f"{moment.microsecond // 10000:02d}",
        "t": "a" if am else "p",
        "tt": "am" if am else "pm",
        "T": "A" if am else "P",
        "TT": "AM" if am else "PM",
        "Z": "UTC",
        "o": "+0000",
        "p": "+00:00",
        "S": _ordinal_suffix(moment.day),
        "W": str(moment.isocalendar()[1]),
        "WW": f"{moment.isocalendar()[1]:02d}",
        "N": str(moment.isoweekday()),
    }

    def replace(match: re.Match) -> str:
        token = match.group(0)
        if token[0] in "'\"":
            return token[1:-1]
        return tokens[token]

    return _TOKEN_PATTERN.sub(replace, mask)


# =============================================================================
# Directive
# =============================================================================


class DateDirective(DirectiveDefinition):
    """Formats date results of annotated object fields."""

    kind = DirectiveKind.DATE
    locations = FIELD_LOCATIONS

    def __init__(self, name: str, default_format: str = DEFAULT_DATE_FORMAT):
        super().__init__(name)
        self.default_format = default_format

    @property
    def arguments(self) -> str:
        return f"defaultFormat: String = {self._quote(self.default_format)}"

    @staticmethod
    def _quote(text: str) -> str:
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    def visit_field(self, field: GraphQLField, field_name: str, parent) -> GraphQLField:
        if not isinstance(parent, GraphQLObjectType):
            return field
        args: Optional[DateArgs] = self.arguments_for(field)
        if args is None:
            return field

        logger.debug(f"@{self.name} applied to {parent.name}.{field_name}")
        return self.date_field(field, args.default_format or self.default_format)

    def visit_input_field(self, field: GraphQLInputField, field_name: str, parent) -> GraphQLInputField:
        if self.locate(field) is not None:
            raise DirectiveConfigError(
                f"@{self.name} requires a field that accepts arguments, "
                f"but {parent.name}.{field_name} has none"
            )
        return field

    def date_field(self, field: GraphQLField, default_format: str) -> GraphQLField:
        """Return a copy of ``field`` that formats its result."""
        if getattr(field, "args", None) is None:
            raise DirectiveConfigError("Requires at least one argument, yet none was provided.")

        def transform(value: Any, args: dict[str, Any]) -> str:
            mask = args.get(FORMAT_ARG)
            return format_date(value, mask if mask is not None else default_format)

        return GraphQLField(**{
            **field.to_kwargs(),
            "type_": GraphQLString,
            "args": {**field.args, FORMAT_ARG: GraphQLArgument(GraphQLString)},
            "resolve": wrap_resolver(
                field.resolve,
                transform,
                reserved_args=(FORMAT_ARG,),
                accepts=(str, date),
            ),
        })


def date_directive(name: str = "date", default_format: str = DEFAULT_DATE_FORMAT) -> DateDirective:
    return DateDirective(name, default_format)

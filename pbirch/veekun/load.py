"""Incremental loading of tables from Veekun CSV files.

A table class derives from :class:`CsvTable`, names its `source` layout (see
:mod:`pbirch.veekun.tables`), builds its empty state in `__init__`, and
applies one :class:`Record` at a time in `load_csv_record`.  The first
failure aborts the whole table.
"""

import csv
import logging
import os.path

from pbirch.veekun.values import (
    ReprError, from_veekun_field, is_blank, nullable_from_veekun_field)

log = logging.getLogger(__name__)

# Veekun IDs above this belong to rows outside the main series (Shadow moves,
# Conquest abilities) and are skipped where they can occur.
SENTINEL_ID = 10000


class LoadError(Exception):
    """Base class for errors while loading a CSV table.

    `path` is the file being loaded, if known; `line` is the line a record
    starts on, if known.
    """

    path = None
    line = None

    def _line(self):
        if self.line is None:
            return '?'
        return str(self.line)

    def _prefix(self):
        if self.path is None:
            return ''
        return '{0}: '.format(self.path)


class CsvError(LoadError):
    """The CSV file is malformed or can't be read."""

    def __init__(self, message, line=None):
        LoadError.__init__(self, message, line)
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return '{0}CSV error: {1}'.format(self._prefix(), self.message)
        return '{0}CSV error on line {1}: {2}'.format(
            self._prefix(), self.line, self.message)


class RecordLengthError(LoadError):
    """A record has no field at the requested index."""

    def __init__(self, line, index):
        LoadError.__init__(self, line, index)
        self.line = line
        self.index = index

    def __str__(self):
        return '{0}Record on line {1} too short for field index {2}.'.format(
            self._prefix(), self._line(), self.index)


class VeekunError(LoadError):
    """A field holds a value that isn't valid for pbirch.

    `debug` is the underlying decoding error, or a message for checks made
    while assembling tables.
    """

    def __init__(self, line, field, debug):
        LoadError.__init__(self, line, field, debug)
        self.line = line
        self.field = field
        self.debug = debug

    def __str__(self):
        return '{0}Error on line {1} field {2}: {3!r}'.format(
            self._prefix(), self._line(), self.field, self.debug)


class ColumnLayout(object):
    """Field indexes and nullability of the columns of one source."""

    def __init__(self, source):
        columns = list(source.c)
        self.names = [column.key for column in columns]
        self.indexes = dict(
            (name, index) for index, name in enumerate(self.names))
        self.nullable = tuple(column.nullable for column in columns)

    def index(self, column):
        """The field index of a column, given by name or index."""
        if isinstance(column, int):
            return column
        return self.indexes[column]

    def is_nullable(self, index):
        return index < len(self.nullable) and self.nullable[index]


_layouts = {}


def column_layout(source):
    """The layout of `source`, built on first use."""
    layout = _layouts.get(source)
    if layout is None:
        layout = _layouts[source] = ColumnLayout(source)
    return layout


class Record(object):
    """One CSV record, along with the line it starts on."""

    def __init__(self, source, fields, line, layout=None):
        self.source = source
        self.fields = fields
        self.line = line
        self.layout = layout or column_layout(source)

    def __repr__(self):
        return '<Record {0} line {1}: {2!r}>'.format(
            self.source.name, self.line, self.fields)

    def index(self, column):
        """The field index of a column, given by name or index."""
        return self.layout.index(column)

    def _text(self, index):
        if index >= len(self.fields):
            raise RecordLengthError(self.line, index)
        return self.fields[index]

    def text(self, column):
        """The raw text of a field."""
        return self._text(self.layout.index(column))

    def field(self, column, kind, default=None):
        """Decode a field.

        A blank field in a nullable column is `default`, normally None.
        Otherwise `default` only stands in for a blank field that fails to
        parse.
        """
        index = self.layout.index(column)
        field = self._text(index)
        nullable = self.layout.is_nullable(index)
        try:
            if nullable and default is None:
                return nullable_from_veekun_field(kind, field)
            if nullable and is_blank(field):
                return default
            return from_veekun_field(kind, field, default)
        except ReprError as e:
            raise VeekunError(self.line, index, e) from e

    def error(self, column, debug):
        """An error about a field, for checks made by the caller."""
        return VeekunError(self.line, self.layout.index(column), debug)


def _check_header(layout, source, header, line):
    for index, (expected, actual) in enumerate(zip(layout.names, header)):
        if expected != actual:
            raise CsvError(
                "expected column {0!r} at index {1} of {2}, found {3!r}"
                .format(expected, index, source.name, actual), line)


def read_records(csvfile, source, has_headers=True):
    """Yield the records of a CSV file, in file order.

    With `has_headers`, the first row names the columns; each name must
    agree with `source`.  Every row must have as many fields as the first.
    Blank lines are skipped.
    """
    layout = column_layout(source)
    reader = csv.reader(csvfile, strict=True)
    expected_length = None
    line = 1
    try:
        for fields in reader:
            start = line
            line = reader.line_num + 1
            if not fields:
                continue
            if expected_length is None:
                expected_length = len(fields)
                if has_headers:
                    _check_header(layout, source, fields, start)
                    continue
            elif len(fields) != expected_length:
                raise CsvError(
                    "found record with {0} fields, but the previous record "
                    "has {1} fields".format(len(fields), expected_length),
                    start)
            yield Record(source, fields, start, layout)
    except csv.Error as e:
        raise CsvError(str(e), reader.line_num) from e


class CsvTable(object):
    """Base class for tables built incrementally from one CSV file.

    Subclasses set `source`, set up their empty state in `__init__`, and
    implement `load_csv_record`.
    """

    source = None
    path = None

    @classmethod
    def from_empty_csv(cls):
        return cls()

    @classmethod
    def from_csv(cls, csvfile, has_headers=True):
        """Load a table from an open CSV file."""
        table = cls.from_empty_csv()
        count = 0
        for record in read_records(csvfile, cls.source, has_headers):
            table.load_csv_record(record)
            count += 1
        log.info("Loaded %d records from %s", count, cls.source.name)
        return table

    @classmethod
    def from_csv_file(cls, path, has_headers=True):
        """Load a table from the CSV file at `path`."""
        log.debug("Opening %s", path)
        try:
            csvfile = open(path, 'r', encoding='utf8', newline='')
        except IOError as e:
            error = CsvError(str(e))
            error.path = path
            raise error from e
        try:
            with csvfile:
                table = cls.from_csv(csvfile, has_headers)
        except LoadError as e:
            e.path = path
            raise
        except UnicodeDecodeError as e:
            error = CsvError(str(e))
            error.path = path
            raise error from e
        table.path = path
        return table

    @classmethod
    def from_csv_directory(cls, directory):
        """Load a table from its file in `directory`."""
        return cls.from_csv_file(csv_path(directory, cls.source))

    def load_csv_record(self, record):
        raise NotImplementedError

    def error(self, line, column, debug):
        """An error about a row of this table found after loading it."""
        error = VeekunError(
            line, column_layout(self.source).index(column), debug)
        error.path = self.path
        return error


def csv_path(directory, source):
    return os.path.join(directory, '{0}.csv'.format(source.name))

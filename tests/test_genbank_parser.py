"""Tests for the GenBank flat-file parser."""

import io
import textwrap
from pathlib import Path

import pytest

from genbank_explorer.domain.errors import GenbankExplorerError, MalformedNumberError
from genbank_explorer.domain.models.entry import Entry
from genbank_explorer.domain.models.enums import LineKind, TerminalEntryPolicy
from genbank_explorer.infrastructure.importers.genbank_parser import (
    CONTINUATION_INDENT,
    GenbankFlatFileParser,
    classify_line,
    split_authors,
)

SAMPLE = Path(__file__).parent / "data" / "sample.gbff"


@pytest.fixture
def parser():
    return GenbankFlatFileParser()


def _parse(text: str, **kw) -> list[Entry]:
    return GenbankFlatFileParser(**kw).parse_text(textwrap.dedent(text).strip("\n"))


# ===========================================================================
# Line classification
# ===========================================================================


class TestClassifyLine:
    @pytest.mark.parametrize(
        "line, kind",
        [
            ("LOCUS       AB123   368 bp", LineKind.LOCUS),
            ("ACCESSION   AB123", LineKind.ACCESSION),
            ("DEFINITION  Test gene.", LineKind.DEFINITION),
            ("REFERENCE   1", LineKind.REFERENCE),
            ("AUTHORS   Smith,J.", LineKind.AUTHORS),
            ("TITLE     A study", LineKind.TITLE),
            ("JOURNAL   Nature", LineKind.JOURNAL),
            ("PUBMED   12345", LineKind.PUBMED),
            ("ORGANISM  Homo sapiens", LineKind.OTHER),
            ("//", LineKind.OTHER),
            ("", LineKind.OTHER),
            ("locus lowercase is not a tag", LineKind.OTHER),
        ],
    )
    def test_kinds(self, line, kind):
        assert classify_line(line) is kind

    def test_classification_is_on_prefix(self):
        assert classify_line("REFERENCES") is LineKind.REFERENCE


# ===========================================================================
# Author splitting
# ===========================================================================


class TestSplitAuthors:
    def test_comma_and_and(self):
        assert split_authors("Reilly,L.P., Evans,M. and Atari,N.") == [
            "Reilly,L.P.",
            "Evans,M.",
            "Atari,N.",
        ]

    def test_two_authors(self):
        assert split_authors("Smith,J. and Jones,K.") == ["Smith,J.", "Jones,K."]

    def test_and_inside_a_name_is_kept(self):
        assert split_authors("Anderson,P. and Sandoval,R.") == ["Anderson,P.", "Sandoval,R."]

    def test_comma_without_space_is_kept(self):
        assert split_authors("Reilly,L.P.") == ["Reilly,L.P."]

    def test_empty_tokens_are_dropped(self):
        assert split_authors("  ") == []
        assert split_authors("Smith,J., ") == ["Smith,J."]


# ===========================================================================
# Single entry
# ===========================================================================


class TestSingleEntry:
    def test_example_record(self):
        entries = _parse(
            """
            LOCUS       AB123  368 bp    mRNA    linear   PRI 05-FEB-1999
            DEFINITION  Test gene.
            REFERENCE   1
            AUTHORS     Smith,J. and Jones,K.
            TITLE       A study
            PUBMED      12345
            """
        )
        assert len(entries) == 1
        entry = entries[0]
        assert entry.locus == "AB123"
        assert entry.definition == "Test gene."
        assert len(entry.references) == 1
        ref = entry.references[0]
        assert ref.authors == {"Smith,J.", "Jones,K."}
        assert ref.title == "A study"
        assert ref.pubmed_id == 12345

    def test_entry_without_references(self):
        entries = _parse(
            """
            LOCUS       AB123  368 bp
            ACCESSION   AB123 XM_0001
            DEFINITION  Homo sapiens mRNA for prepro cortistatin like peptide,
                        complete cds.
            """
        )
        assert len(entries) == 1
        entry = entries[0]
        assert entry.locus == "AB123"
        assert entry.accession == "ACCESSION   AB123 XM_0001"
        assert entry.definition == (
            "Homo sapiens mRNA for prepro cortistatin like peptide, complete cds."
        )
        assert entry.references == []

    def test_defaults_when_fields_absent(self):
        entry = _parse("LOCUS       AB123")[0]
        assert entry.accession == "unknown"
        assert entry.definition == "unknown"

    def test_locus_without_name_keeps_default(self):
        assert _parse("LOCUS")[0].locus == "unknown"

    def test_indented_locus_line(self):
        entries = GenbankFlatFileParser().parse(["  LOCUS   XY99  12 bp"])
        assert entries[0].locus == "XY99"


# ===========================================================================
# References
# ===========================================================================


class TestReferences:
    def test_n_references_in_order(self):
        blocks = "\n".join(f"REFERENCE   {i}\n  TITLE     Paper {i}" for i in range(1, 6))
        entries = GenbankFlatFileParser().parse_text(f"LOCUS       AB123\n{blocks}")
        assert len(entries) == 1
        assert [r.title for r in entries[0].references] == [f"Paper {i}" for i in range(1, 6)]

    def test_reference_defaults(self):
        ref = _parse("LOCUS       AB123\nREFERENCE   1")[0].references[0]
        assert ref.authors == set()
        assert ref.title == "unknown"
        assert ref.journal == "unknown"
        assert ref.pubmed_id == 0

    def test_duplicate_authors_collapse(self):
        ref = _parse(
            """
            LOCUS       AB123
            REFERENCE   1
              AUTHORS   Smith,J., Smith,J. and Smith,J.
            """
        )[0].references[0]
        assert ref.authors == {"Smith,J."}

    def test_open_reference_closes_with_its_entry(self):
        entries = _parse(
            """
            LOCUS       FIRST
            REFERENCE   1
              TITLE     First paper
            LOCUS       SECOND
            REFERENCE   1
              TITLE     Second paper
            """
        )
        assert [e.locus for e in entries] == ["FIRST", "SECOND"]
        assert [r.title for r in entries[0].references] == ["First paper"]
        assert [r.title for r in entries[1].references] == ["Second paper"]

    def test_reference_left_open_at_locus_is_not_carried_over(self):
        entries = _parse(
            """
            LOCUS       FIRST
            REFERENCE   1
            LOCUS       SECOND
              AUTHORS   Smith,J.
            """
        )
        assert len(entries[0].references) == 1
        assert entries[1].references == []

    def test_multiline_authors(self):
        ref = _parse(
            """
            LOCUS       AB123
            REFERENCE   1
              AUTHORS   Reilly,L.P., Evans,M.,
                        Atari,N. and Smith,J.
              TITLE     A study
            """
        )[0].references[0]
        assert ref.authors == {"Reilly,L.P.", "Evans,M.", "Atari,N.", "Smith,J."}
        assert ref.title == "A study"

    def test_multiline_title(self):
        ref = _parse(
            """
            LOCUS       AB123
            REFERENCE   1
              TITLE     Mitochondrial heme export in erythroid
                        progenitor cells
            """
        )[0].references[0]
        assert ref.title == "Mitochondrial heme export in erythroid progenitor cells"

    def test_journal_continuation_keeps_indentation(self):
        ref = _parse(
            """
            LOCUS       AB123
            REFERENCE   1
              JOURNAL   Blood 135 (2),
                        101-110 (2020)
            """
        )[0].references[0]
        assert ref.journal == "Blood 135 (2)," + " " * 13 + "101-110 (2020)"

    def test_single_line_journal(self):
        ref = _parse(
            """
            LOCUS       AB123
            REFERENCE   1
              JOURNAL   Nature 409, 860-921 (2001)
            """
        )[0].references[0]
        assert ref.journal == "Nature 409, 860-921 (2001)"


# ===========================================================================
# Continuation lines
# ===========================================================================


class TestContinuation:
    TEXT = "Homo sapiens transmembrane protein 14C (TMEM14C), transcript variant 2, mRNA."

    @pytest.mark.parametrize("width", [12, 20, 35, 70, 200])
    def test_joining_does_not_depend_on_wrapping(self, width):
        first, *rest = textwrap.wrap(self.TEXT, width=width, break_long_words=False)
        lines = ["LOCUS       AB123", f"DEFINITION  {first}"]
        lines += [CONTINUATION_INDENT + part for part in rest]
        entry = GenbankFlatFileParser().parse(lines)[0]
        assert entry.definition == self.TEXT

    def test_line_after_continuation_is_classified(self):
        entry = _parse(
            """
            LOCUS       AB123
            DEFINITION  Test gene,
                        complete cds.
            ACCESSION   AB123
            """
        )[0]
        assert entry.definition == "Test gene, complete cds."
        assert entry.accession == "ACCESSION   AB123"

    def test_line_right_after_single_line_field_is_classified(self):
        ref = _parse(
            """
            LOCUS       AB123
            REFERENCE   1
              TITLE     A study
              JOURNAL   Nature
               PUBMED   42
            """
        )[0].references[0]
        assert ref.title == "A study"
        assert ref.journal == "Nature"
        assert ref.pubmed_id == 42

    def test_eleven_spaces_is_not_a_continuation(self):
        lines = ["LOCUS       AB123", "DEFINITION  Test gene.", " " * 11 + "not part of it"]
        assert GenbankFlatFileParser().parse(lines)[0].definition == "Test gene."

    def test_deeper_indent_still_continues(self):
        lines = ["LOCUS       AB123", "DEFINITION  Test", " " * 16 + "gene."]
        assert GenbankFlatFileParser().parse(lines)[0].definition == "Test gene."

    def test_continuation_swallows_tag_like_text(self):
        lines = [
            "LOCUS       AB123",
            "REFERENCE   1",
            "  TITLE     On the",
            CONTINUATION_INDENT + "REFERENCE genome",
        ]
        entry = GenbankFlatFileParser().parse(lines)[0]
        assert len(entry.references) == 1
        assert entry.references[0].title == "On the REFERENCE genome"

    def test_continuation_at_end_of_input(self):
        lines = ["LOCUS       AB123", "DEFINITION  Test", CONTINUATION_INDENT + "gene."]
        assert GenbankFlatFileParser().parse(lines)[0].definition == "Test gene."


# ===========================================================================
# Out-of-context lines and errors
# ===========================================================================


class TestContext:
    def test_fields_before_locus_are_ignored(self):
        entries = _parse(
            """
            ACCESSION   ZZ999
            DEFINITION  Orphan.
            LOCUS       AB123
            """
        )
        assert len(entries) == 1
        assert entries[0].accession == "unknown"
        assert entries[0].definition == "unknown"

    def test_reference_fields_without_reference_are_ignored(self):
        entry = _parse(
            """
            LOCUS       AB123
              AUTHORS   Smith,J.
              TITLE     Lost
               PUBMED   not-a-number
            """
        )[0]
        assert entry.references == []

    def test_malformed_pubmed_raises(self):
        with pytest.raises(MalformedNumberError) as exc_info:
            _parse(
                """
                LOCUS       AB123
                REFERENCE   1
                   PUBMED   12a45
                """
            )
        assert exc_info.value.value == "12a45"
        assert exc_info.value.line_number == 3

    def test_malformed_number_is_a_value_error(self):
        with pytest.raises(ValueError):
            _parse("LOCUS       AB123\nREFERENCE   1\nPUBMED")
        assert issubclass(MalformedNumberError, GenbankExplorerError)


# ===========================================================================
# End of input
# ===========================================================================


class TestTerminalEntry:
    NO_RECORDS = "COMMENT     nothing here\n//"

    def test_default_policy_yields_nothing_without_locus(self):
        assert GenbankFlatFileParser().parse_text(self.NO_RECORDS) == []

    def test_empty_input(self):
        assert GenbankFlatFileParser().parse([]) == []

    def test_always_policy_yields_placeholder(self):
        parser = GenbankFlatFileParser(terminal_entry=TerminalEntryPolicy.ALWAYS)
        entries = parser.parse_text(self.NO_RECORDS)
        assert entries == [Entry()]
        assert entries[0].locus == "unknown"

    def test_always_policy_adds_nothing_when_an_entry_exists(self):
        parser = GenbankFlatFileParser(terminal_entry="always")
        entries = parser.parse_text("LOCUS       AB123")
        assert [e.locus for e in entries] == ["AB123"]

    def test_policy_is_exposed(self):
        assert GenbankFlatFileParser().terminal_entry is TerminalEntryPolicy.WHEN_OPENED


# ===========================================================================
# Input shapes and sample file
# ===========================================================================


class TestInputs:
    def test_lines_with_terminators(self):
        lines = io.StringIO("LOCUS       AB123\r\nDEFINITION  Test\r\n            gene.\r\n")
        entry = GenbankFlatFileParser().parse(lines.readlines())[0]
        assert entry.definition == "Test gene."

    def test_generator_input(self):
        lines = (line for line in ["LOCUS       AB123", "ACCESSION   AB123"])
        assert GenbankFlatFileParser().parse(lines)[0].accession == "ACCESSION   AB123"

    def test_parser_is_reusable(self, parser):
        first = parser.parse_text("LOCUS       ONE\nREFERENCE   1")
        second = parser.parse_text("LOCUS       TWO")
        assert len(first[0].references) == 1
        assert [e.locus for e in second] == ["TWO"]
        assert second[0].references == []


class TestSampleFile:
    @pytest.fixture
    def entries(self, parser):
        return parser.parse(SAMPLE.read_text(encoding="utf-8").splitlines())

    def test_entry_count(self, entries):
        assert [e.locus for e in entries] == ["NM_001354870", "AB000263"]

    def test_first_entry(self, entries):
        entry = entries[0]
        assert entry.accession == "ACCESSION   NM_001354870 XM_011514594"
        assert entry.definition == (
            "Homo sapiens transmembrane protein 14C (TMEM14C), transcript variant 2, mRNA."
        )
        assert len(entry.references) == 2

    def test_first_reference(self, entries):
        ref = entries[0].references[0]
        assert ref.authors == {"Reilly,L.P.", "Evans,M.", "Atari,N."}
        assert ref.title == "Mitochondrial heme export in erythroid progenitor cells"
        assert ref.pubmed_id == 31851234

    def test_second_entry_reference_without_pubmed(self, entries):
        ref = entries[1].references[0]
        assert ref.title == "Direct Submission"
        assert ref.journal == "Submitted (15-JAN-1997) to the DDBJ/EMBL/GenBank databases."
        assert ref.pubmed_id == 0

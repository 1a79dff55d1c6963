"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input bytes, helping catch edge cases that example-based tests miss.
"""

from collections import Counter

from hypothesis import given, settings
from hypothesis import strategies as st

from sourcecheck.incidents import IncidentKind
from sourcecheck.scanner import LineScanner, ScanState


def count_eols(data: bytes) -> int:
    """Reference count: every LF, plus every CR not followed by LF."""
    lone_cr = sum(
        1
        for i, b in enumerate(data)
        if b == 0x0D and (i + 1 == len(data) or data[i + 1] != 0x0A)
    )
    return data.count(b"\n") + lone_cr


# Bytes biased toward the interesting classes
interesting_bytes = st.lists(
    st.sampled_from([0x0A, 0x0D, 0x09, 0x00, 0x1F, 0x41, 0x80, 0xBF, 0xC3, 0xE2, 0xF0, 0xFF]),
    max_size=200,
).map(bytes)


class TestLineCount:
    @given(st.binary(max_size=500))
    @settings(max_examples=200)
    def test_line_count_matches_eols(self, data: bytes) -> None:
        """line_count equals LFs plus lone CRs, for any bytes."""
        scanner = LineScanner()
        list(scanner.scan([data]))
        assert scanner.line_count == count_eols(data)

    @given(interesting_bytes)
    @settings(max_examples=200)
    def test_line_count_matches_eols_dense(self, data: bytes) -> None:
        scanner = LineScanner()
        list(scanner.scan([data]))
        assert scanner.line_count == count_eols(data)


class TestReportOnce:
    @given(st.binary(max_size=500))
    @settings(max_examples=200)
    def test_at_most_one_report_per_kind(self, data: bytes) -> None:
        incidents = list(LineScanner().scan([data]))
        per_kind = Counter(i.kind for i in incidents)
        assert all(n == 1 for n in per_kind.values())

    @given(interesting_bytes)
    @settings(max_examples=200)
    def test_reported_iff_counted(self, data: bytes) -> None:
        """A kind is reported exactly when its counter is non-zero."""
        scanner = LineScanner()
        reported = {i.kind for i in scanner.scan([data])}
        counted = {kind for kind, n in scanner.counts.items() if n}
        assert reported == counted

    @given(st.integers(min_value=1, max_value=50))
    def test_k_tabs_one_report(self, k: int) -> None:
        scanner = LineScanner()
        incidents = list(scanner.scan([b"\t" * k + b"\n"]))
        assert [i.kind for i in incidents] == [IncidentKind.TAB]
        assert scanner.counts[IncidentKind.TAB] == k


class TestCleanText:
    @given(
        st.lists(
            st.text(
                alphabet=st.characters(
                    exclude_categories=("Cs",),
                    min_codepoint=0x20,
                ),
                max_size=40,
            ),
            max_size=20,
        )
    )
    @settings(max_examples=200)
    def test_clean_utf8_lf_text_has_no_incidents(self, lines: list[str]) -> None:
        """Well-formed UTF-8, LF endings, no tabs or C0 controls: nothing to report."""
        data = "".join(f"{line}\n" for line in lines).encode("utf-8")
        scanner = LineScanner()
        assert list(scanner.scan([data])) == []
        assert scanner.line_count == len(lines)
        assert scanner.state is ScanState.BEGINNING_OF_LINE

    @given(st.binary(max_size=200))
    def test_lf_terminated_never_missing_eol(self, data: bytes) -> None:
        incidents = list(LineScanner().scan([data + b"\n"]))
        assert IncidentKind.MISSING_EOL not in {i.kind for i in incidents}


class TestChunkInvariance:
    @given(st.binary(max_size=300), st.integers(min_value=1, max_value=17))
    @settings(max_examples=200)
    def test_chunk_size_does_not_matter(self, data: bytes, size: int) -> None:
        """Splitting the input anywhere gives the same incidents and counts."""
        whole = LineScanner()
        expected = list(whole.scan([data]))

        chunked = LineScanner()
        chunks = [data[i : i + size] for i in range(0, len(data), size)]
        assert list(chunked.scan(chunks)) == expected
        assert chunked.counts == whole.counts
        assert chunked.line_count == whole.line_count


class TestDeterminism:
    @given(st.binary(max_size=200))
    @settings(max_examples=50)
    def test_repeated_scan_identical(self, data: bytes) -> None:
        first = list(LineScanner().scan([data]))
        second = list(LineScanner().scan([data]))
        assert first == second

    @given(st.binary(max_size=200))
    @settings(max_examples=100)
    def test_lines_are_in_range(self, data: bytes) -> None:
        """Incident lines are 1-based and never beyond the last line."""
        scanner = LineScanner()
        for incident in scanner.scan([data]):
            assert 1 <= incident.lineno <= scanner.line_count + 1

    @given(st.binary(max_size=200))
    @settings(max_examples=100)
    def test_line_numbers_never_decrease(self, data: bytes) -> None:
        linenos = [i.lineno for i in LineScanner().scan([data])]
        assert linenos == sorted(linenos)

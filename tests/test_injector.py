"""Tests for marker-delimited content replacement."""

import pytest

from term_deps.injection import MissingMarkerError, find_marker_span, inject


START = "<start>"
END = "<end>"


class TestInject:
    def test_replaces_region_between_markers(self):
        assert inject("A<start>B<end>C", "X", START, END) == "A<start>\nX\n    <end>C"

    def test_preserves_text_outside_markers(self):
        document = "head\n<start>old\nstuff<end>\ntail"
        result = inject(document, "new", START, END)
        assert result.startswith("head\n<start>")
        assert result.endswith("<end>\ntail")
        assert "old" not in result

    def test_empty_region(self):
        assert inject("<start><end>", "X", START, END) == "<start>\nX\n    <end>"

    def test_empty_payload(self):
        assert inject("A<start>B<end>C", "", START, END) == "A<start>\n\n    <end>C"

    def test_payload_inserted_verbatim(self):
        payload = "a\r\nb\t<script>&amp;</script>\u00e9\\n\n"
        result = inject("<start><end>", payload, START, END)
        assert result[len(START) + 1:result.index(END) - 5] == payload

    def test_does_not_mutate_input(self):
        document = "A<start>B<end>C"
        inject(document, "X", START, END)
        assert document == "A<start>B<end>C"

    def test_uses_first_occurrence_of_start_marker(self):
        result = inject("<start>1<end>2<start>3<end>", "X", START, END)
        assert result == "<start>\nX\n    <end>2<start>3<end>"

    def test_end_marker_before_start_is_ignored(self):
        result = inject("<end>A<start>B<end>C", "X", START, END)
        assert result == "<end>A<start>\nX\n    <end>C"


class TestMissingMarkers:
    def test_missing_start_marker(self):
        with pytest.raises(MissingMarkerError) as exc:
            inject("A B<end>C", "X", START, END)
        assert exc.value.marker == START

    def test_missing_end_marker(self):
        with pytest.raises(MissingMarkerError) as exc:
            inject("A<start>B C", "X", START, END)
        assert exc.value.marker == END

    def test_end_marker_only_before_start(self):
        with pytest.raises(MissingMarkerError) as exc:
            inject("<end>A<start>B", "X", START, END)
        assert exc.value.marker == END
        assert exc.value.after == len("<end>A<start>")

    def test_error_message_names_marker(self):
        with pytest.raises(MissingMarkerError, match="/\\* term-css-end \\*/"):
            inject("/* term-css-start */", "X", "/* term-css-start */", "/* term-css-end */")


class TestFindMarkerSpan:
    def test_returns_insertion_point_and_end(self):
        assert find_marker_span("A<start>B<end>C", START, END) == (8, 9)

    def test_adjacent_markers(self):
        assert find_marker_span("<start><end>", START, END) == (7, 7)


class TestOrderIndependence:
    PAIRS = [("<a>", "</a>"), ("<b>", "</b>"), ("<c>", "</c>"), ("<d>", "</d>")]
    DOCUMENT = "0<a>1</a>2<b>3</b>4<c>5</c>6<d>7</d>8"

    def _apply(self, order):
        document = self.DOCUMENT
        for i in order:
            start, end = self.PAIRS[i]
            document = inject(document, f"payload-{i}", start, end)
        return document

    @pytest.mark.parametrize("order", [
        [3, 2, 1, 0],
        [1, 3, 0, 2],
        [2, 0, 3, 1],
    ])
    def test_disjoint_pairs_commute(self, order):
        assert self._apply(order) == self._apply([0, 1, 2, 3])

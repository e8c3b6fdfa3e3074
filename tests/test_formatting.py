from app.formatting import format_timestamp, format_transcript
from app.models import Segment


def test_format_transcript_labels_each_segment_in_order():
    segments = [
        Segment(start=0, end=2, text="hi"),
        Segment(start=65, end=70, text="there"),
    ]

    assert format_transcript(segments) == "(0:00) hi (1:05) there"


def test_format_timestamp_pads_seconds_and_floors_fraction():
    assert format_timestamp(125) == "(2:05)"
    assert format_timestamp(59.99) == "(0:59)"
    assert format_timestamp(3600.4) == "(60:00)"


def test_format_transcript_keeps_segment_text_verbatim():
    segments = [Segment(start=1.5, end=3.0, text=" Hola,\nworld")]

    assert format_transcript(segments) == "(0:01)  Hola,\nworld"


def test_format_transcript_without_segments_is_empty():
    assert format_transcript([]) == ""
    assert format_transcript(None) == ""

from captionkit import (
    Cue,
    TranscriptResult,
    WebVTTParser,
    assemble_transcript,
    format_cue_line,
    is_empty_transcript,
)


def test_format_cue_line():
    assert format_cue_line(Cue(start=5.5, text="Hello & welcome")) == "[00:05] Hello & welcome"


def test_assemble_transcript_preserves_order():
    cues = [Cue(start=70.0, text="later"), Cue(start=3.0, text="earlier")]
    result = assemble_transcript(cues, language="en")
    assert result.language == "en"
    assert result.lines == ("[01:10] later", "[00:03] earlier")
    assert result.text == "[01:10] later\n[00:03] earlier"
    assert not result.no_captions_found


def test_assemble_transcript_empty():
    result = assemble_transcript([])
    assert result.language == "unknown"
    assert result.text == ""
    assert result.no_captions_found


def test_no_captions_flag_on_whitespace_only():
    assert TranscriptResult(language="en", lines=(" ", "\t")).no_captions_found


def test_line_count_matches_parsed_cues():
    payload = (
        "WEBVTT\n\n"
        "00:00:01.000 --> 00:00:02.000\none\n\n"
        "00:00:02.000 --> 00:00:03.000\n\n"
        "00:00:03.000 --> 00:00:04.000\ntwo\nlines\n"
    )
    cues = WebVTTParser().parse(payload)
    result = assemble_transcript(cues, "pt")
    assert len(result.text.splitlines()) == len(cues) == 2


def test_is_empty_transcript():
    assert is_empty_transcript("")
    assert is_empty_transcript("  \n ")
    assert not is_empty_transcript("[00:01] hi")

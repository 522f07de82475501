import time
from unittest.mock import Mock

import pytest
import requests

from captionkit import (
    AttemptVariant,
    CaptionSourceResolver,
    Hit,
    Miss,
    ResolutionCancelled,
    RetrievalAttempt,
    TransportError,
    YouTubeClient,
    build_attempt_matrix,
)

VTT_BODY = "WEBVTT\n\n00:00:07.000 --> 00:00:09.000\nHi there\n"
XML_BODY = '<transcript><text start="5.5" dur="2">Hello &amp; welcome</text></transcript>'

MATRIX = build_attempt_matrix(["pt", "en"], [AttemptVariant.PLAIN, AttemptVariant.VTT])


def make_resolver(side_effect, matrix=MATRIX, prefetch_workers=1):
    client = Mock()
    client.fetch_captions.side_effect = side_effect
    return CaptionSourceResolver(client=client, matrix=matrix, prefetch_workers=prefetch_workers), client


def test_default_matrix_order():
    matrix = build_attempt_matrix()
    assert [str(a) for a in matrix[:5]] == ["pt/plain", "pt/asr", "pt/vtt", "pt/asr+vtt", "pt-BR/plain"]
    assert len(matrix) == 16
    assert matrix[-1] == RetrievalAttempt("es", AttemptVariant.ASR_VTT)


def test_variant_request_parameters():
    assert AttemptVariant.PLAIN.kind is None and AttemptVariant.PLAIN.fmt is None
    assert AttemptVariant.ASR.kind == "asr" and AttemptVariant.ASR.fmt is None
    assert AttemptVariant.VTT.kind is None and AttemptVariant.VTT.fmt == "vtt"
    assert AttemptVariant.ASR_VTT.kind == "asr" and AttemptVariant.ASR_VTT.fmt == "vtt"


def test_miss_miss_hit_stops_at_first_hit():
    resolver, client = make_resolver([
        (404, ""),
        (200, "   \n"),
        (200, VTT_BODY),
        (200, XML_BODY),
    ])
    resolution = resolver.resolve("dQw4w9WgXcQ")

    assert resolution.found
    assert resolution.language == "en"
    assert resolution.attempt == MATRIX[2]
    assert resolution.attempts_made == 3
    assert resolution.cues[0].text == "Hi there"
    assert client.fetch_captions.call_count == 3


def test_all_empty_bodies_is_not_an_error():
    resolver, client = make_resolver([(200, "")] * len(MATRIX))
    resolution = resolver.resolve("dQw4w9WgXcQ")

    assert not resolution.found
    assert resolution.language == "unknown"
    assert resolution.cues == []
    assert resolution.attempts_made == len(MATRIX)


def test_matching_signature_without_cues_is_a_miss():
    resolver, _ = make_resolver([
        (200, "WEBVTT\n\n"),
        (200, "<transcript></transcript>"),
        (200, "no timing here"),
        (200, XML_BODY),
    ])
    resolution = resolver.resolve("dQw4w9WgXcQ")
    assert resolution.attempt == MATRIX[3]
    assert resolution.cues[0].text == "Hello & welcome"


def test_timeout_is_a_miss():
    resolver, _ = make_resolver([
        requests.Timeout("slow"),
        requests.ConnectionError("reset"),
        (200, XML_BODY),
    ])
    resolution = resolver.resolve("dQw4w9WgXcQ")
    assert resolution.language == "en"


def test_transport_error_when_no_attempt_reaches_endpoint():
    resolver, _ = make_resolver([requests.ConnectionError("dns")] * len(MATRIX))
    with pytest.raises(TransportError) as excinfo:
        resolver.resolve("dQw4w9WgXcQ")
    assert excinfo.value.video_id == "dQw4w9WgXcQ"
    assert excinfo.value.attempts == len(MATRIX)
    assert isinstance(excinfo.value.cause, requests.ConnectionError)


def test_mixed_transport_failures_and_http_misses_find_nothing():
    resolver, _ = make_resolver([
        requests.ConnectionError("dns"),
        (404, "not found"),
        requests.Timeout("slow"),
        (500, ""),
    ])
    resolution = resolver.resolve("dQw4w9WgXcQ")
    assert not resolution.found


def test_evaluate_outcomes():
    resolver, _ = make_resolver([])
    attempt = MATRIX[0]
    assert isinstance(resolver.evaluate(attempt, 403, VTT_BODY), Miss)
    assert isinstance(resolver.evaluate(attempt, 200, None), Miss)
    outcome = resolver.evaluate(attempt, 200, "1\n00:00:03,200 --> 00:00:05,000\nTest line\n")
    assert isinstance(outcome, Hit)
    assert outcome.cues[0].text == "Test line"


def test_prefetch_keeps_priority_order():
    def fetch(video_id, attempt):
        if attempt == MATRIX[1]:
            time.sleep(0.2)
            return 200, VTT_BODY
        if attempt == MATRIX[0]:
            return 404, ""
        return 200, XML_BODY

    resolver, client = make_resolver(fetch, prefetch_workers=4)
    resolution = resolver.resolve("dQw4w9WgXcQ")

    assert resolution.attempt == MATRIX[1]
    assert resolution.cues[0].text == "Hi there"
    assert resolution.attempts_made == 2


def test_cancel_stops_scan():
    resolver, client = make_resolver(None)
    client.owns_session = True

    def fetch(video_id, attempt):
        resolver.cancel()
        return 404, ""

    client.fetch_captions.side_effect = fetch
    with pytest.raises(ResolutionCancelled):
        resolver.resolve("dQw4w9WgXcQ")

    assert client.fetch_captions.call_count == 1
    client.close.assert_called_once()
    assert resolver.cancelled


def test_empty_matrix_finds_nothing():
    resolver, client = make_resolver([], matrix=[])
    resolution = resolver.resolve("dQw4w9WgXcQ")
    assert not resolution.found
    client.fetch_captions.assert_not_called()


def test_cancel_leaves_borrowed_session_open():
    session = Mock()
    session.headers = {}
    resolver = CaptionSourceResolver(client=YouTubeClient(session=session), matrix=MATRIX)

    resolver.cancel()

    assert resolver.cancelled
    session.close.assert_not_called()


def test_cancel_closes_own_session():
    client = YouTubeClient()
    client.session = Mock()
    resolver = CaptionSourceResolver(client=client, matrix=MATRIX)

    resolver.cancel()

    client.session.close.assert_called_once()

"""
Custom search order example.

Demonstrates restricting the language matrix, shortening the timeout and
enabling speculative parallel fetching.
"""

import json
import logging

from captionkit import AttemptVariant, TranscriptConfig, fetch_transcript_from_config

logging.basicConfig(level=logging.DEBUG)

def main():
    config = TranscriptConfig(
        languages=("en", "en-GB"),
        variants=(AttemptVariant.VTT, AttemptVariant.ASR_VTT),
        timeout=3.0,
        prefetch_workers=4,
        title_backend="yt-dlp",
    )

    print("Search order:", [str(attempt) for attempt in config.matrix()])

    result = fetch_transcript_from_config("https://youtu.be/dQw4w9WgXcQ", config)
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))

if __name__ == "__main__":
    main()

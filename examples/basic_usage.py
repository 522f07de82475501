"""
Basic CaptionKit usage example.

Fetches the title and normalized transcript of a YouTube video.
"""

import logging
import sys

from captionkit import InvalidIdentifier, TransportError, fetch_transcript

# Configure logging to see captionkit internal logs
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

    try:
        result = fetch_transcript(url)
    except InvalidIdentifier as e:
        print(f"Invalid input: {e}")
        return 1
    except TransportError as e:
        print(f"Could not reach YouTube: {e}")
        return 2

    print(f"Title: {result.video_title}")
    print(f"Language: {result.language}")

    if result.no_captions_found:
        print(result.info)
        return 0

    print()
    print(result.transcript)
    return 0

if __name__ == "__main__":
    sys.exit(main())

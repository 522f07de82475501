"""
Offline parsing example.

Normalizes a local caption file (XML, VTT or SRT) without any network access.
"""

import sys

from captionkit import assemble_transcript, parse_captions

def main():
    if len(sys.argv) < 2:
        print("usage: parse_file.py CAPTION_FILE")
        return 1

    with open(sys.argv[1], 'r', encoding='utf-8') as f:
        content = f.read()

    fmt, cues = parse_captions(content)
    print(f"Detected format: {fmt.value}")

    if not cues:
        print("No usable cues found")
        return 0

    print(assemble_transcript(cues).text)
    return 0

if __name__ == "__main__":
    sys.exit(main())

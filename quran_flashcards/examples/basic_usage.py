"""
Basic usage example for the quran-flashcards library.

This example demonstrates the core workflow:
1. Validate and parse a user-entered reference
2. Fetch the verse from the Quran.com API
3. Build flashcards and output them as JSON
"""

import json

from quran_flashcards import (
    QuranApiClient,
    get_surah_display_name,
    parse_reference,
    transform_to_flashcards,
    validate_input,
)


def process_reference(user_input: str):
    """
    Turn a single reference into flashcards.

    Args:
        user_input: Reference such as "2:255" or "Al-Baqarah 255"

    Returns:
        List of flashcards as dictionaries
    """
    print(f"Processing reference {user_input!r}")
    print("=" * 50)

    # Step 1: Validate and parse
    print("\n📝 Step 1: Parsing reference...")

    result = validate_input(user_input)
    if not result.valid:
        print(f"   ❌ {result.error}")
        return []

    ref = parse_reference(user_input)
    print(f"   {get_surah_display_name(ref.surah)} {ref.verse_key}")

    # Step 2: Fetch the verse
    print("\n📖 Step 2: Fetching verse...")

    with QuranApiClient() as client:
        verse = client.fetch_verse(ref.surah, ref.ayah)

    print(f"   Loaded {len(verse.words)} tokens")
    print(f"   {verse.text_uthmani}")

    # Step 3: Build flashcards
    print("\n🃏 Step 3: Building flashcards...")

    flashcards = transform_to_flashcards(verse.words, verse.fallback_audio_url)
    for card in flashcards[:5]:  # Show first 5
        audio = "🔊" if card.audio_url else "  "
        print(f"   {audio} {card.arabic} ({card.transliteration}): {card.meaning}")

    if len(flashcards) > 5:
        print(f"   ... and {len(flashcards) - 5} more")

    return [card.model_dump(by_alias=True) for card in flashcards]


def main():
    """Run example."""
    cards = process_reference("Al-Baqarah 255")

    output_path = "flashcards_2_255.json"
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(cards, f, ensure_ascii=False, indent=2)

    print(f"\n💾 Saved {len(cards)} flashcards to {output_path}")


if __name__ == "__main__":
    main()

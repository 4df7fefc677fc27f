import os
import sys
import json
import spacy
import inflect
from wordfreq import top_n_list, zipf_frequency

WORD_LEN = 4
ZIPF_FREQUENCY_THRESHOLD = 3.0
CANDIDATE_POOL_SIZE = 50000


def is_regular_plural(tok, p) -> bool:
    """True for nouns like 'cats' or 'boxes' whose singular is the word minus 's'/'es'."""
    if tok.pos_ not in ("NOUN", "PROPN"):
        return False
    word = tok.text.lower()
    singular_form = p.singular_noun(word)
    if not singular_form:
        return False
    return (singular_form + 's') == word or (singular_form + 'es') == word


def build_word_list(output_dir, processed_dir):
    """
    Builds the default dictionary of 4-letter words.

    1.  Take the most common English words from wordfreq and keep the
        lower-case alphabetic ones that are exactly 4 letters long.
    2.  Drop regular plural nouns ('cats', 'dogs'), found with spaCy POS tags
        and inflect's singular_noun().
    3.  Drop words below the Zipf frequency threshold.
    4.  Write the survivors, most frequent first, to 'four-letter-words.txt'
        and a JSON summary of each step next to the rejected plurals.

    Args:
        output_dir (str): Directory the word list is written to (the package data directory).
        processed_dir (str): Directory for the rejected plurals and summary.
    """
    print("Starting word list creation...")
    os.makedirs(output_dir, exist_ok=True)
    os.makedirs(processed_dir, exist_ok=True)

    # --- Step 1: Candidate words ---
    candidates = [
        word for word in top_n_list("en", CANDIDATE_POOL_SIZE)
        if len(word) == WORD_LEN and word.isalpha() and word.isascii() and word.islower()
    ]
    print(f"Found {len(candidates)} {WORD_LEN}-letter candidates in the top {CANDIDATE_POOL_SIZE} words.")

    # --- Step 2: Remove plural nouns ---
    print("\nLoading spaCy model and filtering plurals... (This may take a moment)")
    try:
        nlp = spacy.load("en_core_web_sm", disable=["ner", "parser"])
    except OSError:
        print("\n--- SpaCy Model Not Found ---", file=sys.stderr)
        print("The 'en_core_web_sm' model is missing.", file=sys.stderr)
        print("Please download it by running: python -m spacy download en_core_web_sm", file=sys.stderr)
        sys.exit(1)

    p = inflect.engine()
    kept, rejected_plurals = [], []
    for doc in nlp.pipe(candidates, batch_size=1000):
        tok = doc[0]
        if is_regular_plural(tok, p):
            rejected_plurals.append(tok.text)
        else:
            kept.append(tok.text)
    print(f"Retained {len(kept)} words after removing {len(rejected_plurals)} plural nouns.")

    # --- Step 3: Frequency filter ---
    print(f"\nFiltering words with Zipf frequency < {ZIPF_FREQUENCY_THRESHOLD}...")
    with_freq = [(word, zipf_frequency(word, "en")) for word in kept]
    with_freq = [(word, freq) for word, freq in with_freq if freq >= ZIPF_FREQUENCY_THRESHOLD]
    with_freq.sort(key=lambda x: x[1], reverse=True)
    print(f"Retained {len(with_freq)} words after frequency filter.")

    # --- Step 4: Save ---
    output_filepath = os.path.join(output_dir, "four-letter-words.txt")
    rejected_filepath = os.path.join(processed_dir, "rejected_plurals.txt")
    summary_filepath = os.path.join(processed_dir, "word_list_summary.json")
    summary_stats = {
        "parameters": {
            "word_length": WORD_LEN,
            "candidate_pool_size": CANDIDATE_POOL_SIZE,
            "zipf_frequency_threshold": ZIPF_FREQUENCY_THRESHOLD
        },
        "counts": {
            "candidates": len(candidates),
            "removed_plural_nouns": len(rejected_plurals),
            "final_word_list": len(with_freq)
        }
    }

    try:
        with open(output_filepath, 'w') as f:
            for word, _ in with_freq:
                f.write(f"{word}\n")
        print(f"Saved {len(with_freq)} words to '{output_filepath}'.")

        with open(rejected_filepath, 'w') as f:
            for word in sorted(rejected_plurals):
                f.write(f"{word}\n")

        with open(summary_filepath, 'w') as f:
            json.dump(summary_stats, f, indent=4)
        print(f"Word list summary saved to '{summary_filepath}'.")
    except IOError as e:
        print(f"Error writing word list files: {e}", file=sys.stderr)
        sys.exit(1)


def main():
    SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
    PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, '..', '..'))

    build_word_list(
        output_dir=os.path.join(PROJECT_ROOT, "word_guesser/data"),
        processed_dir=os.path.join(PROJECT_ROOT, "data/processed"),
    )


if __name__ == "__main__":
    main()

"""Inspect how an Eure file is tokenized to aid highlighting work."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from eureblog.highlight import SemanticToken, TokenModifier, find_code_regions, semantic_tokens


def main() -> None:
    parser = argparse.ArgumentParser(description="Show Eure token classes and embedded code regions.")
    parser.add_argument("file", help="Local Eure file path")
    parser.add_argument("--tokens", action="store_true", help="Print every token with its text")
    args = parser.parse_args()

    content = load_source(args.file)
    tokens = semantic_tokens(content)
    types, modifiers = collect_stats(tokens)

    print("Token types:")
    for name, count in types.most_common():
        print(f"{name}: {count}")

    print("\nModifiers:")
    for name, count in modifiers.most_common():
        print(f"{name}: {count}")

    print("\nCode regions:")
    for region in find_code_regions(content):
        line = content.count("\n", 0, region.content_start) + 1
        language = region.language or "(none)"
        print(f"line {line}: {language} ({region.content_end - region.content_start} chars)")

    if args.tokens:
        print("\nTokens:")
        for token in tokens:
            text = content[token.start : token.end]
            print(f"{token.start:>6} {token.token_type.value:<18} {text!r}")


def load_source(file_path: str) -> str:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Eure file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(tokens: list[SemanticToken]) -> tuple[Counter, Counter]:
    types = Counter()
    modifiers = Counter()

    for token in tokens:
        types[token.token_type.value] += 1
        for flag in (TokenModifier.DECLARATION, TokenModifier.DEFINITION, TokenModifier.SECTION_HEADER):
            if token.modifiers & flag:
                modifiers[flag.name.lower()] += 1
    return types, modifiers


if __name__ == "__main__":
    main()

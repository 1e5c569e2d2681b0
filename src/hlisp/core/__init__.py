"""
Core Package.

Contains the compiler proper:
- Tree rewriting (`rewrite`)
- Style DSL compilation (`styles`)
- Tag normalization (`normalize`) against the tag registry (`registry`)
- Module and document assembly (`module`, `document`)
- The output model (`bundle`)
"""

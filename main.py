"""Main entry point for generating Markdown documentation from source comments."""

from xmldoc2md.generate_docs import main

if __name__ == "__main__":
    raise SystemExit(main())

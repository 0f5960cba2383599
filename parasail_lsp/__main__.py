"""Allow running as ``python -m parasail_lsp``."""

from parasail_lsp.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())

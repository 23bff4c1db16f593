# -*- coding: utf-8 -*-
"""CLI module entry point for `python -m gameimage_wizard.gui`."""

from __future__ import annotations

from gameimage_wizard.main import main


if __name__ == "__main__":
    raise SystemExit(main())

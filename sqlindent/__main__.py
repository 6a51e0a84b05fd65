#!/usr/bin/env python3
"""
SQLIndent - Entry point script

Format from the console:
    python -m sqlindent

Or use as a library:
    from sqlindent import format_sql
    print(format_sql("select a, b from t where a = 1"))
"""

import sys

from sqlindent.core.shell import main

if __name__ == '__main__':
    sys.exit(main())

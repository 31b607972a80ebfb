"""envy package.

Environment variable exporter: reads a YAML mapping of variable names to
strings or lists of strings and prints shell ``export`` statements.

Public entrypoint: `python -m envy` or `bin/envy`.
"""

"""
Huiji CLI

Command-line interface for the MediaWiki action API client.

Usage:
    python -m huiji_cli --endpoint https://example.org/w/api.php query list=allpages aplimit=5
    python -m huiji_cli get action=parse page="Main Page" prop=text
    python -m huiji_cli post action=purge titles=Foo titles=Bar
"""

__version__ = "0.1.0"

# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_API_ERROR = 2

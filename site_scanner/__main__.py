"""Allow ``python -m site_scanner``."""
from site_scanner.cli import cli

if __name__ == "__main__":
    cli(prog_name="site-scanner")

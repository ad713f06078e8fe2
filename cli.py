# cli.py

"""
Точка входа для запуска SiteScanner из корня репозитория без установки пакета.

Пример запуска:
    python cli.py sitemap example.com reports/seo.xlsx --limit 50
    python cli.py compare-sitemaps old.example.com new.example.com reports/missing.csv
"""
from site_scanner.cli import cli


if __name__ == '__main__':
    cli(prog_name='site-scanner')

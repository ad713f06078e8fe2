# setup.py
from setuptools import setup, find_packages

setup(
    name="site_scanner",
    version="0.1.0",
    description="SEO-сканер sitemap и сравнение sitemap двух сайтов",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "openpyxl>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "site-scanner=site_scanner.cli:cli",
        ],
    },
    python_requires=">=3.11",
)

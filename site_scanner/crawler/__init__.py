"""Sitemap crawler: page models, filters, HTTP fetching and orchestration."""

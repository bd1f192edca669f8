"""Headless-browser scraper for the Wake County mugshot listing."""

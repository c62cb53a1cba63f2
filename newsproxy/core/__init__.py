"""Core modules for the news proxy: configuration of retries, logging, execution."""

"""Command-line interface and interactive terminal picker."""

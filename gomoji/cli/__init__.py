"""Command-Line Interface Package"""

"""Command-line subcommands for eventlayout"""

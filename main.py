#!/usr/bin/env python3
"""
Receipt Engine - Entry Point

Prices a shopping basket with sales tax and import duty and prints the
receipt.

Usage:
    python main.py receipt "1 book at 12.49" "1 music CD at 14.99"
    python main.py receipt --file data/basket.txt --header "Output 1:"
    python main.py receipt --file data/basket.txt --table --export-json receipt.json
    python main.py demo
    python main.py rates
"""

from receipt_engine.cli import main

if __name__ == "__main__":
    main()

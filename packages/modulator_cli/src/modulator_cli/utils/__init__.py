"""CLI helpers"""

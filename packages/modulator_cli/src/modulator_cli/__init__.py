"""Modulator CLI - sample, export and inspect modulation sources"""

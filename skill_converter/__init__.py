"""Core logic for the Skill JSON to CSV converter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- read a Skill JSON document
- decode it against the Skill schema
- flatten the record into header/value sections
- stitch the sections into one CSV row
"""

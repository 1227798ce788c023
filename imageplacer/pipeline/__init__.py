"""Pipeline stages — images, document, placer.

Each stage consumes plain values and hands its result to the next.
The stages in order:

  images    — parse, merge and filter scraped image records
  document  — host document snapshot (node tree, selection, viewport)
  placer    — scan placeholders, match images, grid-pack the rest, apply
"""

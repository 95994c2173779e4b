"""Pipeline stages — styling and layout.

Each stage feeds the next; rendering sits outside this package.  The
stages in order:

  styling  — derive a font size and a colour for every word
  layout   — position all measured words around the cloud center
"""

# -*- coding: utf-8 -*-
#
#    Copyright © 2024 The fontconv Authors
#
#    This file is part of fontconv
#
#    fontconv is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    fontconv is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with fontconv.  If not see <http://www.gnu.org/licenses/>.
#
'''

Utilities
=============================

Diagnostics, and text renderings of packed glyphs for eyeballing a font
in the terminal.

'''
from sys import stderr
from .layout import CHAR_H, CHAR_W


_verbose = False


def set_verbose(flag=True):
  '''Turn :py:func:`log` output on or off.'''
  global _verbose
  _verbose = bool(flag)


def log(message, *args):
  if _verbose:
    print(message % args if args else message, file=stderr)


def pixy(row, one='@', zero=' ', width=CHAR_W):
  '''
  Render a packed scanline as a string, leftmost pixel (bit 0) first.

    >>> pixy(0b00000101, '#', '.')
    '#.#.....'

  '''
  return ''.join(one if row >> px & 1 else zero for px in range(width))


def glyph_lines(font, cn, one='@', zero=' '):
  '''Return the :py:obj:`CHAR_H` rendered scanlines of glyph ``cn``.'''
  return [pixy(row, one, zero) for row in font.glyph(cn)]


def glyph_chart(font, glyphs, one='@', zero=' '):
  '''
  Render several glyphs side by side, each column headed by its glyph
  number and separated by ``|``.
  '''
  glyphs = list(glyphs)
  rendered = [glyph_lines(font, cn, one, zero) for cn in glyphs]
  lines = ['|'.join(('%-*x' % (CHAR_W, cn)) for cn in glyphs)]
  lines.append('|'.join(['-' * CHAR_W] * len(glyphs)))
  for py in range(CHAR_H):
    lines.append('|'.join(g[py] for g in rendered))
  return '\n'.join(lines)

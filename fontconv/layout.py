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

Glyph Grid Layout
========================================

The raw dump is a grid of :py:obj:`COL_NCHARS` block-rows, each holding
:py:obj:`ROW_NCHARS` glyphs of :py:obj:`CHAR_W` by :py:obj:`CHAR_H`
pixels, one byte per pixel.

Within a block-row the dump is stored one scanline stripe at a time: the
first scanline of all 64 glyphs, then the second scanline of all 64
glyphs, and so on.  So a glyph's sixteen scanlines are NOT contiguous in
the input, they are :py:obj:`STRIPE_WIDTH` bytes apart.

The packed font is simple: sixteen bytes per glyph, one byte per
scanline, glyphs in order.

'''


ROW_NCHARS = 64
'Glyphs per block-row.'

COL_NCHARS = 4
'Block-rows in the grid.'

CHAR_W = 8
'Glyph width in pixels (also bits per packed scanline.)'

CHAR_H = 16
'Glyph height in scanlines (also bytes per packed glyph.)'

GLYPH_COUNT = ROW_NCHARS * COL_NCHARS
'Number of glyphs in a font, 256.'

STRIPE_WIDTH = ROW_NCHARS * CHAR_W
'Bytes in one scanline stripe of a block-row in the raw dump.'

BLOCK_ROW_SIZE = STRIPE_WIDTH * CHAR_H
'Bytes in one whole block-row of the raw dump.'

INPUT_SIZE = GLYPH_COUNT * CHAR_W * CHAR_H
'Size in bytes of a raw glyph dump, 32768.'

OUTPUT_SIZE = GLYPH_COUNT * CHAR_H
'Size in bytes of a packed font, 4096.'


def _check(name, value, limit):
  if not (0 <= value < limit):
    raise IndexError('%s out of range: %r (must be 0..%i)' % (name, value, limit - 1))


def input_position(cr, cc, py, px):
  '''
  Return the offset in the raw dump of pixel ``px`` of scanline ``py``
  of the glyph at block-row ``cr``, block-column ``cc``.

    >>> input_position(2, 10, 5, 0)
    19024

  '''
  _check('cr', cr, COL_NCHARS)
  _check('cc', cc, ROW_NCHARS)
  _check('py', py, CHAR_H)
  _check('px', px, CHAR_W)
  return (
    cr * BLOCK_ROW_SIZE
    + cc * CHAR_W
    + py * STRIPE_WIDTH
    + px
    )


def glyph_index(cr, cc):
  '''Return the glyph number (0..255) of the glyph at ``cr``, ``cc``.'''
  _check('cr', cr, COL_NCHARS)
  _check('cc', cc, ROW_NCHARS)
  return cr * ROW_NCHARS + cc


def output_position(cn, py):
  '''
  Return the offset in the packed font of scanline ``py`` of glyph
  number ``cn``.

    >>> output_position(138, 5)
    2213

  '''
  _check('cn', cn, GLYPH_COUNT)
  _check('py', py, CHAR_H)
  return cn * CHAR_H + py

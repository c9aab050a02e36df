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

Repacker
========================================

Turn a raw glyph dump (one byte per pixel, zero is ink) into a packed
font (one bit per pixel, one byte per scanline, LSB is the leftmost
pixel.)

The whole input is read before anything is computed, and the whole
output is computed before anything is written.

'''
from .layout import (
  CHAR_H,
  CHAR_W,
  COL_NCHARS,
  GLYPH_COUNT,
  INPUT_SIZE,
  OUTPUT_SIZE,
  ROW_NCHARS,
  glyph_index,
  input_position,
  output_position,
  )
from .util import log


class FontConvError(Exception):
  '''Base class of the errors fontconv reports.'''


class TruncatedInput(FontConvError):
  '''The input held fewer bytes than a whole glyph dump.'''

  def __init__(self, got, expected=INPUT_SIZE):
    FontConvError.__init__(
      self,
      'truncated input: got %i bytes, expected %i' % (got, expected),
      )
    self.got = got
    self.expected = expected


class WriteFailed(FontConvError):
  '''The packed font could not be written out completely.'''


def pack_scanline(pixels):
  '''
  Fold :py:obj:`CHAR_W` pixel bytes into one byte.  Bit ``px`` is set
  iff ``pixels[px]`` is zero (ink.)  Any nonzero byte is background.
  '''
  row = 0
  for px in range(CHAR_W):
    if pixels[px] == 0:
      row |= 1 << px
  return row


class GlyphDump(object):
  '''
  An immutable raw glyph dump of exactly :py:obj:`INPUT_SIZE` bytes.
  '''

  def __init__(self, data):
    data = bytes(data)
    if len(data) < INPUT_SIZE:
      raise TruncatedInput(len(data))
    if len(data) > INPUT_SIZE:
      raise ValueError(
        'glyph dump too long: got %i bytes, expected %i' % (len(data), INPUT_SIZE))
    self.data = data

  def pixel(self, cr, cc, py, px):
    '''Return the raw byte of one pixel.'''
    return self.data[input_position(cr, cc, py, px)]

  def scanline(self, cr, cc, py):
    '''Return the :py:obj:`CHAR_W` raw bytes of one glyph scanline.'''
    start = input_position(cr, cc, py, 0)
    return self.data[start:start + CHAR_W]

  def __len__(self):
    return len(self.data)

  def __bytes__(self):
    return self.data


class PackedFont(object):
  '''
  A packed font of :py:obj:`GLYPH_COUNT` glyphs, :py:obj:`CHAR_H` bytes
  each.
  '''

  def __init__(self, data):
    data = bytes(data)
    if len(data) != OUTPUT_SIZE:
      raise ValueError(
        'packed font must be %i bytes, got %i' % (OUTPUT_SIZE, len(data)))
    self.data = data

  @classmethod
  def read(cls, stream):
    '''Load a packed font previously written by :py:func:`write_font`.'''
    data = _read_exactly(stream, OUTPUT_SIZE)
    if len(data) < OUTPUT_SIZE:
      raise TruncatedInput(len(data), OUTPUT_SIZE)
    return cls(data)

  def glyph(self, cn):
    '''Return the :py:obj:`CHAR_H` scanline bytes of glyph ``cn``.'''
    start = output_position(cn, 0)
    return self.data[start:start + CHAR_H]

  def is_set(self, cn, py, px):
    '''Is pixel ``px`` of scanline ``py`` of glyph ``cn`` ink?'''
    if not (0 <= px < CHAR_W):
      raise IndexError('px out of range: %r' % (px,))
    return bool(self.data[output_position(cn, py)] >> px & 1)

  def __len__(self):
    return len(self.data)

  def __bytes__(self):
    return self.data

  def __eq__(self, other):
    if not isinstance(other, PackedFont):
      return NotImplemented
    return self.data == other.data

  def __hash__(self):
    return hash(self.data)

  def __repr__(self):
    inked = sum(1 for cn in range(GLYPH_COUNT) if any(self.glyph(cn)))
    return '<PackedFont %i glyphs, %i non-blank>' % (GLYPH_COUNT, inked)


def repack(dump):
  '''
  Return the :py:class:`PackedFont` for a :py:class:`GlyphDump` (or for
  raw bytes, which must make a valid dump.)
  '''
  if not isinstance(dump, GlyphDump):
    dump = GlyphDump(dump)
  output = bytearray(OUTPUT_SIZE)
  for cr in range(COL_NCHARS):
    for cc in range(ROW_NCHARS):
      cn = glyph_index(cr, cc)
      for py in range(CHAR_H):
        output[output_position(cn, py)] = pack_scanline(dump.scanline(cr, cc, py))
  return PackedFont(output)


def _read_exactly(stream, n):
  # A single read() may come back short on pipes, keep going until EOF.
  chunks = []
  remaining = n
  while remaining:
    chunk = stream.read(remaining)
    if not chunk:
      break
    chunks.append(chunk)
    remaining -= len(chunk)
  return b''.join(chunks)


def read_dump(stream):
  '''
  Read one :py:class:`GlyphDump` from a binary stream.  Exactly
  :py:obj:`INPUT_SIZE` bytes are consumed, anything after them is left
  in the stream.
  '''
  data = _read_exactly(stream, INPUT_SIZE)
  log('read %i bytes of glyph dump', len(data))
  if len(data) < INPUT_SIZE:
    raise TruncatedInput(len(data))
  return GlyphDump(data)


def write_font(font, stream):
  '''
  Write all of a :py:class:`PackedFont` to a binary stream and flush it.
  '''
  data = bytes(font)
  try:
    n = stream.write(data)
    if n is not None and n != len(data):
      raise WriteFailed('short write: %i of %i bytes' % (n, len(data)))
    stream.flush()
  except OSError as err:
    raise WriteFailed('unable to write packed font: %s' % (err,)) from err
  log('wrote %i bytes of packed font', len(data))


def convert(instream, outstream):
  '''
  Read a raw dump from ``instream`` and write the packed font to
  ``outstream``.  Return the :py:class:`PackedFont`.
  '''
  font = repack(read_dump(instream))
  write_font(font, outstream)
  return font

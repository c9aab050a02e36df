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
# Lets the test modules import fontconv from a source checkout.

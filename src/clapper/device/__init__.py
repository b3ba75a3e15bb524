# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Capture surfaces
# terminal: keypad plugged into the machine running clapper, read from a tty in cbreak mode
# replay: a fixed character sequence, for tests and demos
# capture: the shared surface interface, plus the focus keeper that keeps input flowing

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Input stages
# device level:
# stage 0: capture surface delivers raw characters (terminal, replay, or a host widget)

# slate level:
# stage 1: buffer characters and look each one up in the keymap
# stage 2: run the command against the session and emit one slate event

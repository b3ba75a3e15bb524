# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Slate field groups
# letters: two-tier scene letter suffix arithmetic
# counters: clamp/wrap rules shared by roll, scene, take and prefix counters
# cameras, scene, dualmode, takes: one controller per field group
# session: the per-screen bundle of controllers

# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

MILLIS_PER_SECOND = 1_000

# Allowed slack over the average sample spacing before a window edge is treated
# as a gap rather than sampling jitter.
EXTRAPOLATION_THRESHOLD_FACTOR = 1.1

INF_BUCKET = "+Inf"

"""Canned research report markdown shared by engine, service, API and CLI tests."""

from __future__ import annotations

SAMPLE_REPORT = """\
# Site Intelligence Report: 255 Elm St, Somerville MA

### Executive Summary
Activity near 255 Elm St is steady, with several approvals and one contested \
project ([Somerville Planning](https://www.somervillema.gov/planning)). Overall \
development momentum is strong.

### Planning Activity
- The Planning Board approved a 40-unit residential building at 10 Elm St in \
March 2024 ([Planning Minutes](https://www.somervillema.gov/minutes/2024-03)).
- The Zoning Board granted a parking variance for 22 Cedar St in Q3 2024.
- A permit for a rooftop addition is pending review.

### Community Sentiment
Residents voiced concerns about traffic at the April 2024 hearing \
([Somerville Times](https://thesomervilletimes.com/traffic)). Most neighbors \
support new housing on the corridor.

### Development News
Construction began on the Davis Square lab building in early 2025. A mixed-use \
project at 300 Elm St was proposed by Elm Street Partners \
([Boston Globe](https://www.bostonglobe.com/elm)).

### Tenant Expansion
A regional grocer signed a lease for 12,000 square feet in Sept. 2024 \
([Globe Business](https://www.bostonglobe.com/elm)). A local coffee roaster plans \
to open a second cafe nearby.

### Sources
- [Somerville Planning](https://www.somervillema.gov/planning)
- [Planning Minutes](https://www.somervillema.gov/minutes/2024-03)
- [Somerville Times](https://thesomervilletimes.com/traffic)
- [Boston Globe](https://www.bostonglobe.com/elm)
"""

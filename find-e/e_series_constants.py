"""
find E - E-Series Constants
IEC 60063 preferred-value tables used by series_matcher.py.
"""

# For historical reasons these series do not follow the 10^(k/n) formula and
# have to be listed explicitly (1-decade mantissas, multiply by power of 10).
E3 = (1.0, 2.2, 4.7)

E6 = (1.0, 1.5, 2.2, 3.3, 4.7, 6.8)

E12 = (
    1.0, 1.2, 1.5, 1.8, 2.2, 2.7,
    3.3, 3.9, 4.7, 5.6, 6.8, 8.2,
)

E24 = (
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
)

# Series size -> fixed table.  Larger series are synthesized.
FIXED_SERIES = {
    3:  E3,
    6:  E6,
    12: E12,
    24: E24,
}

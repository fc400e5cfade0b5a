# %% [markdown]
# # Reference fixtures with rapidfuzz
#
# Writes the regression fixture tables using rapidfuzz as the scorer, then
# checks tabfuzz against them.
#
# rapidfuzz's `fuzz.*` ratios are Indel-based while tabfuzz's ratio family is
# Levenshtein-based, so only the methods both libraries define the same way
# are taken from rapidfuzz: the edit distances and the Jaro family.
#
# Requirements:
#     pip install tabfuzz[test]

# %%
import sys
from pathlib import Path

import polars as pl
from rapidfuzz import distance

from tabfuzz.errors import LengthMismatchError
from tabfuzz.fixtures import compare_pairwise_fixture, write_fixtures


def rapidfuzz_hamming(a, b):
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    return distance.Hamming.distance(a, b)


REFERENCE_SCORERS = {
    "levenshtein": distance.Levenshtein.distance,
    "normalized_levenshtein": lambda a, b: distance.Levenshtein.normalized_similarity(a, b) * 100,
    "jaro": lambda a, b: distance.Jaro.similarity(a, b) * 100,
    "jaro_winkler": lambda a, b: distance.JaroWinkler.similarity(a, b) * 100,
    "hamming": rapidfuzz_hamming,
    "osa": distance.OSA.distance,
}

# %%
if __name__ == "__main__":
    out = Path(sys.argv[1] if len(sys.argv) > 1 else "fixtures")
    for path in write_fixtures(out, scorers=REFERENCE_SCORERS):
        print("wrote", path)

    expected = pl.read_csv(out / "test_pairwise.csv")
    mismatches = compare_pairwise_fixture(expected)
    for m in mismatches:
        print(f"{m.method.value:24s} {m.str1!r} vs {m.str2!r}: expected {m.expected}, got {m.actual}")
    print(f"{len(mismatches)} mismatching cells")
    sys.exit(1 if mismatches else 0)

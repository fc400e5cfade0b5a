# %% [markdown]
# # tabfuzz: Quickstart
#
# **Fuzzy scoring for tables** - score string columns against each other, or
# find the best reference entry for every row.
#
# ```
# "Jon Smith"       vs  "John Smith"
# "recieve"         vs  "receive"
# "Gogle"           vs  "Google LLC"
# ```
#
# | Part | Topic |
# |------|-------|
# | 1 | Scoring one pair |
# | 2 | Best match for one query |
# | 3 | Whole columns, in parallel |
# | 4 | Polars |
# | 5 | Host protocol |

# %%
import logging

import polars as pl

import tabfuzz as tfz

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# %% [markdown]
# ---
# ## Part 1: Scoring one pair
#
# Similarity methods return 0-100, distance methods return edit counts.

# %%
print("ratio        ", round(tfz.score("kitten", "sitting"), 2))
print("levenshtein  ", tfz.score("kitten", "sitting", method="levenshtein"))
print("osa          ", tfz.score("recieve", "receive", method="osa"))
print("jaro_winkler ", round(tfz.score("MARTHA", "MARHTA", method="jaro_winkler"), 2))
print("token_sort   ", tfz.score("John Smith", "Smith, John", method="token_sort"))
print("nocase ratio ", tfz.score("JOHN SMITH", "john smith", nocase=True))

for method in tfz.Method:
    try:
        value = tfz.score("Saturday", "Sunday", method=method)
    except tfz.LengthMismatchError:
        value = "n/a (lengths differ)"
    print(f"{method.value:24s} {method.kind.value:10s} {value}")

# %% [markdown]
# Hamming only compares equal-length strings:

# %%
try:
    tfz.hamming_distance("abc", "ab")
except tfz.LengthMismatchError as exc:
    print("hamming:", exc)

# %% [markdown]
# ---
# ## Part 2: Best match for one query
#
# Ties go to the first reference entry; distance methods pick the lowest.

# %%
companies = ["Microsoft Corporation", "Google LLC", "Google Inc", "Amazon.com Inc"]
for query in ["Gogle", "microsoft", "Amazn"]:
    result = tfz.extract_one(query, companies, method="token_set")
    print(f"{query:10s} -> {result.text:22s} (index {result.id}, score {result.score:.1f})")

# %% [markdown]
# ---
# ## Part 3: Whole columns
#
# Rows that cannot be scored get a sentinel and a status instead of aborting
# the batch. `workers` spreads the rows over a process pool; the output order
# never changes.

# %%
results = tfz.pairwise(["abc", "abc", "kitten"], ["abd", "ab", "sitting"], method="hamming")
for r in results:
    print(r.score, r.status.value, r.message or "")

master = ["John Smith", "Jane Doe", "Gogle", "Amazn"] * 250
reference = ["John A. Smith", "Janet Doe", "Google LLC", "Google Inc", "Amazon.com Inc"]

if __name__ == "__main__":
    sequential = tfz.best_matches(master, reference, method="jaro_winkler", workers=1)
    pooled = tfz.best_matches(master, reference, method="jaro_winkler", workers=4)
    assert sequential == pooled
    print(f"{len(pooled)} rows matched, identical with and without the pool")

# %% [markdown]
# ---
# ## Part 4: Polars

# %%
df = pl.DataFrame(
    {
        "name": ["Jon Smith", "Janet Doe", "Micheal Johnson"],
        "other": ["John Smith", "Jane Doe", "Michael Johnson"],
    }
)
print(tfz.score_frame(df, "name", "other", methods=["ratio", "jaro_winkler", "levenshtein"]))

print(
    df.with_columns(
        jw=pl.col("name").fuzzy.score(pl.col("other"), method="jaro_winkler"),
        best=pl.col("name").fuzzy.best_match(["John Smith", "Jane Doe"], nocase=True),
    )
)

print(tfz.batch_best_match(pl.Series(["Gogle", "Amazn"]), companies, method="token_set"))

# %% [markdown]
# ---
# ## Part 5: Host protocol
#
# A host passes `[mode, method, options...]` plus its columns.

# %%
response = tfz.call(["match", "jaro_winkler", "nocase", "pw=0.15"], master=["gogle"], reference=companies)
print(response.to_frame())

# algokit

Classic algorithms and data structures of the kind used in programming
contests, in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

**Number theory**
- `algokit.modular`: modular arithmetic (`mod_mul`, `mod_add`, `mod_sub`,
  `mod_pow`, `mod_inverse`, `mod_div`), factorial tables in `Combination`
  (`ncr`, `npr`), exact binomials (`ncr_exact`, `ncr_pascal`,
  `ncr_recursive`), `catalan`, `derangements` and `range_and` (bitwise AND of
  every integer in a range). The default modulus is 10^9 + 7.
- `algokit.lde`: `extended_gcd` and `solve_lde`, which returns an
  `LdeSolution` for `a*x + b*y = c` or `None` when there is no integer solution.
- `algokit.matrix`: `Matrix` with entries reduced modulo a prime, `@`
  multiplication, `Matrix.identity` and `matrix_power`.
- `algokit.divisors`: `proper_divisors`, `count_proper_divisors`, `sieve`,
  `count_in_range`, `euler_phi`, `prime_factors` and a
  `SmallestPrimeFactorSieve` with `factorize` and `divisors`.
- `algokit.factorize`: `miller_rabin`, `squfof`, `factorize_brute` and
  `factorize` for numbers up to about 10^18, plus `isqrt`, `icbrt`,
  `mul_mod`, `pow_mod` and `is_prime_trial`.
- `algokit.bigint`: `BigInt`, built from an `int` or a decimal string, with
  truncating division, and `big_pow`, `big_pow_mod`, `big_sqrt`, `big_gcd`,
  `big_lcm`.
- `algokit.digit_dp`: `to_digits` and `count_few_nonzero`, counting integers
  in `[0, n]` with at most three non-zero digits.
- `algokit.geometry`: `Point`, `distance`, `is_triangle`, `doubled_area`,
  `heron_area`, `ceil_div`, `is_power_of_two` and `ternary_search`.

**Range structures**
- `algokit.fenwick`: `FenwickTree`, `FenwickMultiset` (rank and
  order-statistic queries on values in `[0, n]`) and `FenwickTree2D`.
- `algokit.prefix2d`: `PrefixSum2D` with 1-based rectangle sums.
- `algokit.segment_tree`: a generic `SegmentTree` (range maximum by default)
  with `find_first` / `find_last`, and `CompactMaxTree`.
- `algokit.lazy_segment_tree`: `LazySumSegmentTree` with range addition and
  range sums.
- `algokit.merge_sort_tree`: `MergeSortTree`, whose `query(left, right)`
  counts positions in the range holding a value greater than `right`.
- `algokit.segment_tree_2d`: `SegmentTree2D` for rectangle maxima.
- `algokit.mo`: Mo's algorithm; `range_mex` gives the smallest missing
  positive value of each `RangeQuery`.

**Ordered sets and sequences**
- `algokit.avl`: `AVLMultiset` with `count`, `lower_bound`, `upper_bound`
  and `render`.
- `algokit.treap_multiset`: `TreapMultiset` with `insert`, `remove` and `at`.
- `algokit.implicit_treap`: `ImplicitTreap`, a list-like sequence with
  `insert`, `erase`, `reverse`, `cycle_shift_right`, `add_range` and
  `range_sum`.
- `algokit.tries`: `BitTrie` (a multiset of 32-bit unsigned integers) and
  `Trie` (words, with `contains` and `has_prefix`).
- `algokit.dsu`: `DisjointSet` over `0 .. n`.
- `algokit.compression`: `Compressor` for coordinate compression.

**Graphs**
- `algokit.graphs`: `kosaraju_scc`, `tarjan_scc`, `find_cycle`, `bridges`,
  `articulation_points` and `dijkstra`.
- `algokit.lca`: binary-lifting `LCA` and `AncestorTable` (k-th ancestor and
  minimum cost on the path to the root).
- `algokit.hld`: `HeavyLightDecomposition` for path maxima with point
  updates; maxima start from 0.
- `algokit.two_sat`: `TwoSat`.

**Strings**
- `algokit.strings`: `is_palindrome`, `z_function`, `prefix_function`,
  `kmp_match` and `KMP`.
- `algokit.hashing`: polynomial double hashing (`HashTables`, `DoubleHash`,
  `double_char_hash`) and an exact base-27 hash for short strings
  (`small_hash`, `add_char_hash`, `remove_char_hash`).
- `algokit.hash_segment_tree`: `HashSegmentTree` answering palindrome queries
  under point updates.
- `algokit.suffix_array`: `SuffixArray` with `order` and `contains`.
- `algokit.binary_substrings`: `count_k_one_substrings`, the number of
  substrings of a binary string holding exactly `k` ones.

**Test data**
- `algokit.randgen`: `RandomGenerator`, seedable, producing integers,
  numbers as strings, strings, permutations, trees, vowels, flags and matrices.
- `algokit.dag_gen`: `generate_dag` and `format_graph` for small random
  directed graphs.

## Examples

```python
from algokit.modular import Combination, mod_pow
from algokit.matrix import Matrix, matrix_power
from algokit.dsu import DisjointSet
from algokit.strings import kmp_match

MOD = 10**9 + 7
comb = Combination(100, MOD)
print(comb.ncr(5, 2))          # 10
print(mod_pow(2, 10, MOD))     # 1024

fib = Matrix(2, 2, MOD)
fib[0, 0] = fib[0, 1] = fib[1, 0] = 1
step = fib @ fib
print(matrix_power(fib, 10)[0, 1])   # 55

dsu = DisjointSet(5)
dsu.union(1, 2)
print(dsu.find(1) == dsu.find(2))    # True

print(kmp_match("ab", "abab"))       # [0, 2]
```

```python
from algokit.segment_tree import SegmentTree

tree = SegmentTree([5, 1, 4, 2], max, float("-inf"))
print(tree.query(1, 3))   # 4
tree.update(1, 9)
print(tree.query(0, 2))   # 9
```

```python
from algokit.randgen import RandomGenerator

rng = RandomGenerator(42)
print(rng.permutation(5))
print(rng.tree(8, 1, 3))
```

## Command-line tools

The first four tools read standard input, or a file named as their argument,
and write standard output.

- `algokit-hld`: reads `n q`, the `n` node values, `n - 1` edges (1-based),
  then `q` queries; `1 a b` sets node `a` to `b`, `2 a b` prints the maximum
  value on the path from `a` to `b` (at least 0).
- `algokit-2sat`: reads the number of clauses and of variables, then each
  clause as two signed 1-based literals; prints `-1` when unsatisfiable,
  otherwise the assignment as `0`/`1` values.
- `algokit-binary-substrings`: reads `k` and a binary string and prints the
  number of substrings holding exactly `k` ones.
- `algokit-palindrome`: reads pairs of 1-based positions and prints `YES` or
  `NO` for whether that range of the text is a palindrome; the text is set
  with `--text` and defaults to `aabaa`.
- `algokit-dag`: prints a small random directed graph as a line `n m`
  followed by one edge per line. An edge is kept only when following the
  most recent out-edges from its source does not revisit a vertex.
  Options: `--seed`, `--vertices` (default 10), `--edges` (default 4).

```
echo "2 0110" | algokit-binary-substrings
algokit-dag --seed 1
```

## Limits

- `factorize` relies on SQUFOF, which cannot split values whose multiplied
  form reaches 2^62; composites that large with no factor below 5000 raise
  `ValueError`.
- The command-line tools answer one input each; there is no interactive mode
  and nothing is stored between runs.
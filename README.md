# puzzlebox

A collection of small programming puzzles, each solved in its own module,
together with a tool that searches for rectangular collages made of images.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The puzzles

Each puzzle lives in its own module under `puzzlebox`. Where an input is
invalid, the functions raise an exception rather than return a flag.

| Module | Entry point | What it does |
| --- | --- | --- |
| `anagram` | `find_anagrams(dictionary, word)`, `normalize(s)` | Entries of a word list that use the same letters as `word`, ignoring case and non-letters; the word itself is left out |
| `brokennode` | `find_broken_nodes(broken_nodes, reports)` | For a ring of nodes, one character per node: `B` broken, `W` working, `?` undecided; a node no consistent placement decides is `"\0"` |
| `buildword` | `build_word(word, fragments)` | Fewest fragments that concatenate to `word`, or 0 |
| `calculator` | `evaluate(expr)`, `tokenise(expr)`, `eval_no_brackets(tokens)` | Evaluates arithmetic with `+ - * /` and brackets; raises `CalculationError` |
| `chess` | `can_knight_attack(white, black)` | Whether knights on two squares attack each other; raises `InvalidSquareError` for malformed or identical squares |
| `coins` | `piles(n)` | Number of ways to split `n` coins into piles |
| `compression` | `encode(text)`, `decode(data)`, `MinPQ` | Huffman coding: `encode` returns bytes, `decode` restores the text; an empty text raises `ValueError` |
| `floyd` | `triangle(rows)` | Floyd's triangle as a list of rows |
| `functionfrequency` | `function_frequency(code)`, `read_functions(code)`, `top_strings(counted, top)` | The three function calls mentioned most often in Go source text |
| `jaro` | `distance(word1, word2)` | Jaro similarity of two words, ignoring case |
| `lastlettergame` | `sequence(words)` | Longest chain of distinct words where each starts with the last letter of the one before |
| `mergesort` | `merge_sort(values)` | A new sorted list |
| `missingnumbers` | `missing(numbers)` | The two numbers of `1..len(numbers)+2` that are absent, smaller first |
| `node_degree` | `degree(nodes, graph, node)` | Number of edges touching a node; raises `NodeNotFoundError` |
| `reverseparentheses` | `reverse(s)` | Reverses the text inside each pair of parentheses, innermost first, and drops the brackets |
| `romannumerals` | `encode(n)`, `decode(s)` | Roman numeral conversion; raises `ValueError` for numbers below 1 or invalid numerals |
| `secretmessage` | `decode(encoded)` | Letters at least as frequent as `_`, most frequent first |
| `shorthash` | `generate_short_hashes(dictionary, length)` | Every string of 1 to `length` characters over an alphabet |
| `snowflakes` | `overlaid_triangles(n, m)` | Triangles lying `m` levels deep in a figure of size `n` |
| `spiral` | `element(n, x, y)`, `render(n)` | A numbered square spiral |
| `sumdecimal` | `sum_decimal(c)` | Sum of the first 1000 decimal digits of the square root of `c` |
| `warriors` | `count(image)` | Number of figures drawn with ones in a grid of digits |
| `wordladder` | `word_ladder(from_word, to_word, dictionary)` | Number of words in the shortest ladder, both ends included, or 0 |

```python
from puzzlebox.romannumerals import encode, decode
from puzzlebox.calculator import evaluate
from puzzlebox import compression

encode(2714)              # "MMDCCXIV"
decode("MMMCD")           # 3400
evaluate("1 / ( 2 / 8 )") # 4.0
compression.decode(compression.encode("hello"))  # "hello"
```

`node_degree` offers several search strategies besides `degree`:
`degree_linear` scans every edge, while `degree_linear_reverse`,
`degree_step_reverse` and `degree_interpol` expect the edges sorted by their
second node, then by their first.

To print the number spiral (size 10 unless another is given):

```
puzzlebox-spiral
puzzlebox-spiral 5
```

## Image collages

`puzzlebox.collage` looks for sets of images that fit together, edge to
edge, into a filled rectangle, and writes every collage it finds to the
current directory as `collage_<time>_<area>.png`.

The `nasacollage` command drives it:

```
nasacollage scrape > urls.txt
nasacollage solve <dir> <ground row size>
```

1. `scrape` prints the image links of the Astronomy Picture of the Day archive, one per line.
2. Download those images into a directory yourself and remove anything that is not a picture.
3. `solve` reads the sizes of all files in the directory and searches for
   collages whose bottom row holds the given number of images. The search is
   exhaustive and runs for a very long time; interrupt it whenever you have
   enough collages. Solutions and progress are reported through the
   `logging` module at INFO level, so they appear only if logging is
   configured to show them.

Any other arguments print the usage text.

The pieces can also be used directly:

- `list_dir(path)` in `puzzlebox.collage.images` reads image sizes into `Imgres` records.
- `Solver(res_data, progress_callback).solve(ground_row_size)` in `puzzlebox.collage.solver`
  runs the search and returns the ground row size and images of the last collage found.
- `layout`, `build_collage` and `write_collage_png(filename, ground_size, images)` in
  `puzzlebox.collage.render` place and draw a collage.
- `scrape_image_urls(main_url)` in `puzzlebox.collage.apod` yields image links.
- `BarGraph`, `Bar`, `Progress` and the helpers in `combinatorics` and `util` support the search.

## What it does not do

- `nasacollage` does not download images; it only prints their links.
- `function_frequency` does not parse Go: it recognises calls with a small
  state machine that looks only at indented lines and skips string contents,
  and it raises `ValueError` when fewer than three distinct calls are found.
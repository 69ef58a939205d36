# wordlabs

Small exercises in text handling and sorting.

## Commands

Both commands ask for two lines of text on standard input. They print the result to standard
output.

```
wordlabs-interleave
```

Splits each line on spaces and prints the words in turns. The order is the first word of line
one, then the first word of line two, then the second word of each line, and so on. When one
line runs out of words, the rest of the other line follows. The words are joined by single
spaces.

```
wordlabs-merge-words
```

Takes the runs of ASCII letters from each line, at most 1000 per line. It puts the words of
line one first and the words of line two after them. The combined list then goes through one
bubble pass, and the result is printed with spaces between the words.

Words are compared without regard to case. Each pass of the bubble sort stops at the first
neighbouring pair that is already in order. Because of that, the output is fully sorted only
for some inputs.

### Errors

If both lines are empty, either command writes `Is empty!` to standard error.

Both commands also write `Only delimeters!` to standard error when neither line has a word
character. What counts as a word character differs:

- `wordlabs-interleave` counts ASCII letters and digits.
- `wordlabs-merge-words` counts ASCII letters only.

## Library

```python
from wordlabs.interleave import interleave_words
from wordlabs.merge_words import merge_and_sort
from wordlabs.sorting import SortOrder, merge_sort

interleave_words("a b c", "1 2")        # "a 1 b 2 c"
merge_and_sort("banana Apple", "cherry")
merge_sort([3.5, 1.0, 2.25], SortOrder.DESCENDING)   # [3.5, 2.25, 1.0]
```

### `wordlabs.interleave`

- `get_words(text)` splits `text` on spaces. Empty pieces are dropped.
- `is_empty(text)` reports whether `text` has no characters.
- `only_delimiters(text)` reports whether `text` has no ASCII letter or digit.
- `interleave_words(first, second)` returns the interleaved string. It raises `ValueError` in
  the two error cases above.

### `wordlabs.merge_words`

- `to_lower_case(text)` lowers ASCII letters only.
- `get_words(text, max_size)` returns at most `max_size` runs of ASCII letters. `max_size`
  defaults to 1000.
- `bubble_sort(words)` returns a copy of `words` after the case-insensitive bubble pass with
  early stop described above.
- `is_empty(text)` reports whether `text` has no characters.
- `only_delimiters(text)` reports whether `text` has no ASCII letter.
- `merge_and_sort(first, second)` returns the combined words as one string. It raises
  `ValueError` in the two error cases above.

### `wordlabs.sorting`

The module has five sorts:

- `bubble_sort`
- `insertion_sort`
- `selection_sort`
- `merge_sort`
- `quick_sort`

Each one is called as `sort(values, order)` and returns a new sorted list. The input is left
unchanged. `order` is a `SortOrder`, either `SortOrder.ASCENDING` (the default) or
`SortOrder.DESCENDING`.

## What it does not do

The sort algorithms are available only as library functions. There is no command that runs
them.

The package does not read numbers from files or from the console. It has no menu for choosing
an algorithm. It also does not handle student records or sort them by average mark.

## Tests

```
pip install -e .[test]
pytest
```
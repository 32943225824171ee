"""
Classic word count job for datadata.
Counts the frequency of each word in the 'text' field of the records.

    datadata run comments.csv --job examples/word_count.py
"""

import string


def map_function(record, emit):
    """
    Map function: emit (word, 1) for each word in the record's text.

    Args:
        record: Input record with a 'text' field
        emit: Callback taking (key, value)
    """
    text = str(record.get('text') or '')
    words = text.translate(str.maketrans('', '', string.punctuation)).split()

    for word in words:
        emit(word.lower(), 1)


def reduce_function(key, values, emit):
    """
    Reduce function: sum all counts for a word.

    Args:
        key: Word
        values: List of counts (all 1s from map)
        emit: Callback taking (key, value)
    """
    emit(key, sum(values))

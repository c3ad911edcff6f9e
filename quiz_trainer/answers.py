"""
Answer checking for test and play
"""

import re
import logging

import unidecode
from num2words import num2words

STRICT = 'strict'
LENIENT = 'lenient'

def check_answer(answer, correct_answer, matching=STRICT, min_matching_characters=5):
    """
    Compare a user's answer with the stored one

    Strict matching is trimmed, case-insensitive equality. Lenient matching
    also accepts the variants produced by answer_variants().
    """

    if answer.strip().lower() == correct_answer.strip().lower():
        return True

    if matching != LENIENT:
        return False

    return lenient_match(answer, correct_answer, min_matching_characters)

def answer_variants(answer):
    answer_filters = [
        lambda x: [unidecode.unidecode(x)] if unidecode.unidecode(x) != x else [],
        lambda x: [re.sub(r'[0-9]+(?:[\.,][0-9]+)?', lambda y: num2words(y.group(0)), x)],
        lambda x: [x.replace(a, b) for a,b in [['&', 'and'],['%', 'percent']] if a in x],
        lambda x: [x[len(a):] for a in ['a ', 'an ', 'the '] if x.startswith(a)],
        lambda x: [''.join([a for a in x if a not in ' '])],
        lambda x: [''.join([a for a in x if a not in '\'().,"-'])],
    ]

    possible_answers = [answer.strip().lower()]
    for answer_filter in answer_filters:
        for possible_answer in possible_answers:
            try:
                possible_answers = list(set(
                    [*possible_answers, *answer_filter(possible_answer)]
                    ))
            except Exception as ex:
                logging.exception(ex)

    return possible_answers

def lenient_match(answer, correct_answer, min_matching_characters=5):
    correct_answer_variations = answer_variants(correct_answer)
    given_answer_variations = answer_variants(answer)

    logging.debug('Correct answers: %s, given answers: %s',
            correct_answer_variations, given_answer_variations)

    for correct_answer_variation in correct_answer_variations:
        for given_answer_variation in given_answer_variations:
            min_match_len = min(min_matching_characters, len(correct_answer_variation))
            if (len(given_answer_variation.strip(' ')) >= min_match_len and
                given_answer_variation.strip() in correct_answer_variation):
                return True

    return False

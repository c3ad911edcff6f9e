import unittest

from quiz_trainer.answers import check_answer, lenient_match, LENIENT, STRICT

class TestAnswers(unittest.TestCase):

    def test_strict_matching(self):
        correct_answers = (
            ('Rome', 'Rome'),
            ('rome', 'Rome'),
            ('  ROME  ', 'Rome'),
            ('4', '4 '),
        )

        incorrect_answers = (
            ('Roma', 'Rome'),
            ('', 'Rome'),
            ('four', '4'),
            ('the cat', 'cat'),
        )

        for answer in correct_answers:
            self.assertTrue(check_answer(*answer, STRICT), answer)

        for answer in incorrect_answers:
            self.assertFalse(check_answer(*answer, STRICT), answer)

    def test_lenient_matching(self):
        correct_answers = (
            ('test', 'test'),
            ('five', '5'),
            ('cdefg', 'abcdefghi'),
            ('one two three', 'onetwothree'),
            ('Thom Yorke', 'Thom (Yorke)'),
            ('one & two', 'one and two'),
            ('cat', 'the cat'),
            ('cliche', 'cliché'),
            ('10%', '10 percent'),
        )

        incorrect_answers = (
            ('one', 'two'),
            ('1', '2'),
            ('1950s', '1960s'),
            ('abcd', 'abcde'),
        )

        for answer in correct_answers:
            self.assertTrue(lenient_match(*answer, 5), answer)

        for answer in incorrect_answers:
            self.assertFalse(lenient_match(*answer, 5), answer)

    def test_lenient_mode_in_check_answer(self):
        self.assertFalse(check_answer('five', '5', STRICT))
        self.assertTrue(check_answer('five', '5', LENIENT, 5))


if __name__ == '__main__':
    unittest.main()

"""
Module for QuizStore class
"""

import logging
import sqlite3
from dataclasses import dataclass
from functools import wraps

from .errors import NotFound, StoreError, ValidationError
from .quiz_database import QuizDatabase

DEFAULT_QUIZZES = (
    ('Capital of Italy', 'Rome'),
    ('Capital of France', 'Paris'),
    ('Capital of Spain', 'Madrid'),
    ('Capital of Portugal', 'Lisbon'),
)

# sqlite INTEGER PRIMARY KEY is a signed 64-bit value
MAX_ID = 2 ** 63 - 1


@dataclass(frozen=True)
class Quiz:
    id: int
    question: str
    answer: str


def _store_operation(func):
    """Translate backend failures into StoreError"""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except sqlite3.Error as ex:
            logging.exception('Quiz store failure in %s', func.__name__)
            raise StoreError(f'Quiz store failure: {ex}') from ex

    return wrapper


class QuizStore:
    """
    Create, read, update and delete quizzes

    Every method reads or writes through the database, nothing is cached.
    """

    def __init__(self, database_path):
        self._db = QuizDatabase(database_path)

    def close(self):
        self._db.close()

    @_store_operation
    def count(self):
        return self._db.select_one('count_quizzes')[0]

    @_store_operation
    def list_all(self):
        return [Quiz(**row) for row in self._db.select_all('list_quizzes', as_map=True)]

    @_store_operation
    def get_by_id(self, quiz_id):
        """
        Returns:
            Quiz or None when no record has the given id
        """

        if not self._valid_id(quiz_id):
            return None

        row = self._db.select_one('get_quiz', {'id': quiz_id}, as_map=True)
        return Quiz(**row) if row else None

    @_store_operation
    def create(self, question, answer):
        question, answer = self._validate(question, answer)
        quiz_id, _ = self._db.execute('add_quiz', {
            'question': question,
            'answer': answer,
            }, auto_commit=True)
        logging.info('Created quiz id: %s', quiz_id)
        return Quiz(quiz_id, question, answer)

    @_store_operation
    def update(self, quiz_id, question, answer):
        question, answer = self._validate(question, answer)
        if not self._valid_id(quiz_id):
            raise NotFound(quiz_id)

        _, rowcount = self._db.execute('update_quiz', {
            'id': quiz_id,
            'question': question,
            'answer': answer,
            }, auto_commit=True)

        if rowcount == 0:
            raise NotFound(quiz_id)

        logging.info('Updated quiz id: %s', quiz_id)
        return Quiz(quiz_id, question, answer)

    @_store_operation
    def delete_by_id(self, quiz_id):
        if not self._valid_id(quiz_id):
            raise NotFound(quiz_id)

        _, rowcount = self._db.execute('delete_quiz', {'id': quiz_id}, auto_commit=True)

        if rowcount == 0:
            raise NotFound(quiz_id)

        logging.info('Deleted quiz id: %s', quiz_id)

    def seed(self, quizzes=DEFAULT_QUIZZES):
        """
        Insert the given question/answer pairs if the table is empty

        Returns:
            int: Number of quizzes inserted
        """

        if self.count() > 0:
            return 0

        for question, answer in quizzes:
            self.create(question, answer)

        return len(quizzes)

    @staticmethod
    def _valid_id(quiz_id):
        return -MAX_ID - 1 <= quiz_id <= MAX_ID

    @staticmethod
    def _validate(question, answer):
        question = (question or '').strip()
        answer = (answer or '').strip()
        messages = []

        if not question:
            messages.append('question: Question must not be empty.')

        if not answer:
            messages.append('answer: Answer must not be empty.')

        if messages:
            raise ValidationError(messages)

        return question, answer

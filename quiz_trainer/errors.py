"""
Error kinds reported to the user by a quiz session
"""


class QuizError(Exception):
    """
    Base class for every error a command can report without ending the session
    """


class MissingParameter(QuizError):
    def __init__(self, name='id'):
        super().__init__(f'Missing parameter {name}.')
        self.name = name


class NotANumber(QuizError):
    def __init__(self, value):
        super().__init__(f'The value of parameter id is not a number: {value!r}')
        self.value = value


class NotFound(QuizError):
    def __init__(self, quiz_id):
        super().__init__(f'No quiz is associated with id={quiz_id}.')
        self.quiz_id = quiz_id


class ValidationError(QuizError):
    """
    Raised when a quiz record is rejected by the store

    Arguments:
        messages (list): One message per failing field
    """

    def __init__(self, messages):
        super().__init__('The quiz is not valid:')
        self.messages = list(messages)


class StoreError(QuizError):
    pass


class ChannelClosed(Exception):
    """
    The line channel has been closed, either by quit or by the remote end
    """

from setuptools import setup
setup(
  name = 'quiz_trainer',
  packages = [
    'quiz_trainer',
    ],
  package_data = {
    'quiz_trainer': ['queries.sql'],
    },
  version = '0.1',
  license='',
  description = 'Line oriented quiz trainer for the terminal and for socket clients',
  author = '',
  author_email = '',
  url = '',
  download_url = '',
  keywords = ['quiz', 'trivia', 'cli'],
  python_requires = '>=3.9',
  install_requires=[
          'Unidecode     >= 1.1.1',
          'num2words     >= 0.5.10',
          'tabulate      >= 0.8.7',
          'colorama      >= 0.4.6',
      ],
  classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Programming Language :: Python :: 3',
  ],
)

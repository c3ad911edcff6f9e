import sys
import json
import asyncio
import logging

from colorama import init as colorama_init

from quiz_trainer import QuizTrainer

mode = (sys.argv[1:2] or ['local'])[0].lower()
config_filename = (sys.argv[2:3] or ['config.json'])[0]
log_level = (sys.argv[3:4] or ['ERROR'])[0].upper()
logging.basicConfig(level = log_level)

if mode not in ('local', 'server'):
    sys.exit(f'usage: {sys.argv[0]} [local|server] [config.json] [LOGLEVEL]')

with open(config_filename, 'r', encoding='utf-8') as fp:
    config = json.load(fp)

colorama_init()
trainer = QuizTrainer(**config)

try:
    if mode == 'server':
        asyncio.run(trainer.serve())
    else:
        asyncio.run(trainer.run_local())
except KeyboardInterrupt:
    logging.info('Interrupted')
finally:
    trainer.close()

""" Logging configuration for the rankwindow programs.

You can override the settings in rankwindow_logging_config.py by copying the
whole file to rankwindow_logging_override.py in the same folder. The settings
here are meant for interactive use: everything goes to standard error, so
program output on standard output stays clean for pipes.

For a detailed description of the settings, see the Python documentation:
https://docs.python.org/3/library/logging.config.html#logging-config-dictschema

Do not commit rankwindow_logging_override.py to source control.
"""

# Only used if you add 'file' to the root handlers in an override.
LOG_FILE = '/tmp/rankwindow.log'

LOGGING = {
    'root': {'handlers': ['console'],
             'level': 'WARNING'},
    'loggers': {
        "__main__": {"level": "INFO"},
        "rankwindow": {"level": "INFO"},
    },

    # This lets you call logging.getLogger() before the configuration is done.
    'disable_existing_loggers': False,

    'version': 1,
    'formatters': {'basic': {
        'format': '%(asctime)s[%(levelname)s]%(name)s.%(funcName)s(): %(message)s',
        'datefmt': '%Y-%m-%d %H:%M:%S'}},
    'handlers': {'console': {'class': 'logging.StreamHandler',
                             'level': 'DEBUG',
                             'formatter': 'basic',
                             'stream': 'ext://sys.stderr'},
                 'file': {'class': 'logging.handlers.RotatingFileHandler',
                          'level': 'DEBUG',
                          'formatter': 'basic',
                          'filename': LOG_FILE,
                          'delay': True,
                          'maxBytes': 1024*1024*15,  # 15MB
                          'backupCount': 10}},
}

## Utils
## @author: Luke Li<zhongwei.li@mavs.uta.edu>

import time
import sympy
import random
import json
import os
import logging
from functools import wraps

logger = logging.getLogger(__name__)

# lambdas
random_list = lambda low, high, count: [random.randint(low, high) for _ in range(count)]

DEFAULT_CONFIG = {
    "DEFAULT_MUL_OPT": "auto",
    "PROFILE": False,
    "LOG_LEVEL": "WARNING"
}
CONFIG_FILENAME = 'modmath.json'
CONFIG_ENV = 'MODMATH_CONFIG_PATH'


def profiler(num_runs=100, enabled=True):
    def decorator(func):
        if not enabled:
            # If profiling is disabled, return the original function unmodified
            return func

        @wraps(func)
        def wrapper(*args, **kwargs):
            total_time = 0
            for _ in range(num_runs):
                start_time = time.perf_counter()
                func(*args, **kwargs)
                end_time = time.perf_counter()
                total_time += (end_time - start_time)
            average_time = total_time / num_runs
            logger.info(f"Average execution time for {func.__name__}: {average_time} seconds")
            return func(*args, **kwargs)

        return wrapper

    return decorator


def generate_large_primes(count, num_bits=1024):
    """Generate a list of large prime numbers of specified bit length."""
    primes = []
    while len(primes) < count:
        prime = sympy.randprime(2 ** (num_bits - 1), 2 ** num_bits)
        primes.append(int(prime))
    return primes


def load_config():
    '''
        Lookup order: modmath.json in the cwd, modmath.json in the project root, then the file named by
        $MODMATH_CONFIG_PATH. Values found are merged over DEFAULT_CONFIG.
    '''
    # Determine the script directory (assumed to be the project root)
    script_directory = os.path.dirname(os.path.abspath(__file__))
    project_root_config_path = os.path.join(script_directory, '..', CONFIG_FILENAME)

    # Paths to check for the config file
    paths_to_check = [
        os.path.join(os.getcwd(), CONFIG_FILENAME),  # Current Working Directory
        os.path.normpath(project_root_config_path)  # Project Root Directory
    ]

    env_config_path = os.getenv(CONFIG_ENV)
    if env_config_path:
        paths_to_check.append(env_config_path)

    for path in paths_to_check:
        if os.path.exists(path):
            with open(path, 'r') as file:
                loaded = json.load(file)
            logger.debug(f'Loaded configuration from {path}')
            return {**DEFAULT_CONFIG, **loaded}

    return dict(DEFAULT_CONFIG)

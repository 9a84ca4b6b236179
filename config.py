# Capacity limits and defaults for the page replacement simulator

MAX_TABLE_SIZE = 100  # Largest page table a simulation accepts
MAX_POOL_SIZE = 100  # Largest frame pool a simulation accepts
MAX_REFERENCE_LENGTH = 100000  # Longest reference string a simulation accepts

ALGORITHMS = ['FIFO', 'LRU', 'LFU']
DEFAULT_ALGORITHM = 'FIFO'

DEFAULT_NUM_PAGES = 32  # Logical pages per process
DEFAULT_NUM_FRAMES = 4  # Physical frames owned by the process

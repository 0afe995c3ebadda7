"""Fixed values shared by the game: key codes, screen size, identifiers and messages."""

ARROW_LEFT = 65361
ARROW_UP = 65362
ARROW_RIGHT = 65363
ARROW_DOWN = 65364
ESC = 65307

WIDTH = 640
HEIGHT = 320
TEXTURES_SIZE = 32

MIN_COLOR = 0
MAX_COLOR = 255

NORTH = "NO"
SOUTH = "SO"
WEST = "WE"
EAST = "EA"
FLOOR = "F"
CEILING = "C"

# Order in which the six configuration entries are tracked.
CONFIG_KEYS = (NORTH, SOUTH, WEST, EAST, FLOOR, CEILING)
TEXTURE_KEYS = (NORTH, SOUTH, WEST, EAST)
COLOR_KEYS = (FLOOR, CEILING)

CONFIG_LINES = 6

MAP_EXTENSION = "cub"
TEXTURE_EXTENSION = "xpm"

WALL = "1"
EMPTY = "0"
PLAYER_CHARS = "NSEW"
OPEN_CHARS = "NSEW0"

ERROR_AMOUNT_ARGS = "Quantidade de argumentos incorreto"
ERROR_EXTENSION_FILE = "Extensão do arquivo incorreto"
FILE_NOT_FOUND = "Arquivo não encontrado"
CONFIG_DATA_INVALID = "Dado de configuração inválido"
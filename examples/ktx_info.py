"""Print the layout of each KTX file passed on the command line."""
import sys

from ktxtools import DecodeError, decode
from ktxtools.logger import init_logging


LOGGER = init_logging(main_logger='ktx_info')

for filename in sys.argv[1:]:
    with open(filename, 'rb') as f:
        try:
            tex = decode(f, apply_orientation=True)
        except DecodeError as exc:
            LOGGER.warning('{}: {}', filename, exc)
            continue
    LOGGER.info(
        '{}: KTX {}, {}D {}x{}x{}, {} layer(s), {} face(s), {} level(s)',
        filename, tex.version, tex.dimensionality,
        tex.base_width, tex.base_height, tex.base_depth,
        tex.num_layers, tex.num_faces, tex.num_levels,
    )
    if tex.format_descriptor.is_unknown:
        continue
    for level in range(tex.num_levels):
        LOGGER.info('  Level {}: {} bytes', level, tex.level_size(level))
    for entry in tex.key_values:
        LOGGER.info('  {} = {!r}', entry.key.decode('utf8', 'replace'), entry.value)

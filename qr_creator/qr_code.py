from . import bitstream, capacity, render, selector
from .config import RenderConfig


class QRcode:
    def __init__(self, data=b'Example', version=None, mask=None, config=None):
        self.data = data.encode('iso-8859-1', errors='replace') if isinstance(data, str) else bytes(data)
        self.config = config or RenderConfig()

        # Step 1 - Picking the version (size) if it wasn't given
        self.version = capacity.smallest_version(len(self.data)) if version is None else version

        # Step 2 - Header, padding and correction bytes, as a sequence of bits
        self.encoded_data = bitstream.encode(self.data, self.version)

        # Step 3 - Placement of information on the QR code
        if mask is None:
            trial = selector.select_best_mask(self.version, self.encoded_data)
        else: # Chosen by hand, no search
            trial = selector.build_with_mask(self.version, self.encoded_data, mask)

        self.mask = trial.mask
        self.score = trial.score
        self.qr = trial.grid

    @property
    def size(self):
        return self.qr.size

    def to_array(self):
        return self.qr.to_array()

    def to_image(self):
        return render.to_image(self.qr, self.config)

    def save(self, path=None):
        return render.save(self.qr, path, self.config)

    def __repr__(self):
        return '<QRcode version=%d mask=%d score=%d>' % (self.version, self.mask, self.score)

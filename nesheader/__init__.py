"""NES Header Decoder — decode the iNES header of ``.nes`` cartridge images."""

__version__ = "0.0.1"

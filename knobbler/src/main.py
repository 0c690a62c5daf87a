"""Knobbler demo gallery - every knob preset in one window.

Usage:
    python main.py [-v] [--preset NAME]
"""
import argparse
import sys
import os
import logging

# Add knobbler/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QGridLayout, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from components.knob_widget import KnobWidget
from components.date_knob_widget import DateKnobWidget
from models.presets import KNOB_PRESETS, DATE_PRESETS, knob_preset, date_preset
from utils.logger import set_main_window

GALLERY_COLUMNS = 4

logger = logging.getLogger('Gallery')


class KnobGallery(QMainWindow):
    """Main window laying out one labelled knob per preset"""

    def __init__(self, names=None):
        super().__init__()
        self.setWindowTitle("Knobbler")
        self.knobs = {}

        central = QWidget()
        grid = QGridLayout(central)
        self.setCentralWidget(central)

        names = names or list(KNOB_PRESETS) + list(DATE_PRESETS)
        for index, name in enumerate(names):
            cell = self._build_cell(name)
            grid.addWidget(cell, index // GALLERY_COLUMNS, index % GALLERY_COLUMNS)

    def _build_cell(self, name):
        cell = QWidget()
        layout = QVBoxLayout(cell)
        title = QLabel(name)
        readout = QLabel()
        title.setAlignment(Qt.AlignCenter)
        readout.setAlignment(Qt.AlignCenter)

        if name in DATE_PRESETS:
            config, value, lock_band = date_preset(name)
            knob = DateKnobWidget(config, value, lock_band)
            knob.dateChanged.connect(lambda d, label=readout: label.setText(d.isoformat()))
            readout.setText(knob.date().isoformat())
        else:
            config, value, colors = knob_preset(name)
            knob = KnobWidget(config, value)
            if colors:
                knob.set_colors(*colors)
            knob.valueChanged.connect(lambda v, label=readout: label.setText(f"{v:g}"))
            readout.setText(f"{knob.value():g}")

        knob.dragFinished.connect(lambda n=name: logger.info("Drag finished on '%s'", n))
        self.knobs[name] = knob

        layout.addWidget(title)
        layout.addWidget(knob, alignment=Qt.AlignCenter)
        layout.addWidget(readout)
        return cell


def main():
    """Main entry point for the demo gallery"""
    parser = argparse.ArgumentParser(description='Knobbler radial input demo gallery.')
    parser.add_argument(
        '-p', '--preset',
        action='append',
        choices=list(KNOB_PRESETS) + list(DATE_PRESETS),
        help='Only show the given preset (repeatable).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args()

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setStyle("Fusion")

    window = KnobGallery(args.preset)
    set_main_window(window)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()

"""
test_plotting.py — Slice Figure Tests
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tensor_rot.plotting import plot_volume
from tensor_rot.volume import Volume


class TestPlotVolume:

    def test_one_panel_per_slice(self):
        fig = plot_volume(Volume(5))
        titled = [ax for ax in fig.axes if ax.get_title()]
        assert [ax.get_title() for ax in titled] == [f"z = {z}" for z in range(5)]
        plt.close(fig)

    def test_labels_match_elements(self):
        fig = plot_volume(Volume(3))
        texts = [t.get_text() for t in fig.axes[0].texts]
        assert texts == list("ABCDEFGHI")
        plt.close(fig)

    def test_large_volume_unlabelled(self):
        fig = plot_volume(Volume(20), max_labels=16)
        assert all(not ax.texts for ax in fig.axes)
        plt.close(fig)

    def test_save(self, tmp_path):
        target = tmp_path / "v.png"
        plot_volume(Volume(4), str(target))
        assert target.stat().st_size > 0

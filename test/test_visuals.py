import os
import numpy as np
from core.transform2d import forward_2d
from core.correlation import cross_correlate
from visuals.plots import plot_magnitude_spectrum, plot_correlation_surface, compare_and_save

def test_plot_spectrum(tmp_path):
    F = forward_2d(np.random.rand(16, 16))
    p = str(tmp_path / "spec" / "spectrum.png")
    assert plot_magnitude_spectrum(F, out_path=p) == p
    assert os.path.exists(p)
    arr = plot_magnitude_spectrum(F)
    assert arr.shape == (16, 16)
    assert arr.min() >= 0.0 and arr.max() <= 1.0

def test_plot_surface_centered():
    A = np.random.rand(8, 8)
    surface = cross_correlate(A, A)
    arr = plot_correlation_surface(surface, center=True)
    # zero shift lands in the middle after centering
    assert np.unravel_index(np.argmax(arr), arr.shape) == (4, 4)

def test_plot_surface_constant(tmp_path):
    p = str(tmp_path / "flat.png")
    assert plot_correlation_surface(np.zeros((4, 4)), out_path=p) == p
    assert os.path.exists(p)

def test_compare_and_save(tmp_path):
    a = np.zeros((8, 8), dtype=np.uint8)
    b = np.ones((8, 8, 3), dtype=np.uint8) * 10
    cls = np.zeros((8, 8, 3), dtype=np.uint8)
    cls[0, 0] = (255, 0, 0)
    p = str(tmp_path / "cmp.png")
    assert compare_and_save(a, b, cls, out_path=p) == p
    assert os.path.exists(p)

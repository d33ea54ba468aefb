# test/test_pipeline_large_image.py
import numpy as np
from core.correlation import cross_correlate, find_peak
from core.classifier import classify, PEAK

def test_large_pipeline():
    img = (np.random.rand(512,512)*255).astype(np.uint8)
    shifted = np.roll(img, (40, -17), axis=(0, 1))
    surface = cross_correlate(shifted, img)
    assert surface.shape == img.shape
    assert find_peak(surface)[:2] == (40, 512 - 17)
    assert classify(surface).bands[40, 512 - 17] == PEAK

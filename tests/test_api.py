import pnglib


def test_public_surface():
    for name in pnglib.__all__:
        assert hasattr(pnglib, name), name


def test_version_string():
    assert isinstance(pnglib.__version__, str)
    assert pnglib.__version__.count(".") == 2


def test_camelcase_aliases():
    img = pnglib.PNGImage(1, 1)
    assert img.setPixel == img.set_pixel
    assert img.getBuffer() == img.get_buffer()
    assert img.getBase64() == img.get_base64()


def test_plan_layout_exported():
    layout = pnglib.plan_layout(2, 2, 2)
    assert isinstance(layout, pnglib.Layout)
    assert layout.total_size == len(pnglib.PNGImage(2, 2, 2).get_buffer())

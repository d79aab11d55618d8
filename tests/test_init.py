"""Tests for hashicon public API."""

import hashicon


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in hashicon.__all__:
            assert hasattr(hashicon, name), f"{name} not importable from hashicon"

    def test_end_to_end_hex_to_vector(self):
        digest = hashicon.hash_from_hex("8843d7f92416211de9ebb963ff4ce28125932878")
        renderer = hashicon.render_vector(digest, 64)
        assert isinstance(renderer, hashicon.VectorPathRenderer)
        assert all(d.startswith("M") for d in renderer.paths.values())

    def test_end_to_end_hex_to_raster(self):
        digest = hashicon.hash_from_hex("8843d7f92416211de9ebb963ff4ce28125932878")
        pixels = hashicon.render_raster(digest, 32)
        assert pixels.shape == (32, 32, 4)
        assert (pixels[..., 3] == 255).all()

    def test_errors_share_base_class(self):
        for exc in (
            hashicon.InvalidInputError,
            hashicon.ConfigurationError,
            hashicon.InternalInvariantError,
        ):
            assert issubclass(exc, hashicon.HashiconError)

"""Splitting author fields into names. Import the submodules directly, `bibnames.model` depends on them."""

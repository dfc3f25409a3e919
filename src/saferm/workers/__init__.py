# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Worker components package. Exports the batch worker that moves a list of
#              paths into the trash directory.

__all__ = ["remove_worker"]

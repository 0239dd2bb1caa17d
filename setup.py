# -*- coding: utf-8 -*-
import re

from setuptools import setup

with open("runasync/__init__.py") as f:
    VERSION = re.search(r"^VERSION = '([^']+)'", f.read(), re.M).group(1)

setup(name="runasync",
      version=VERSION,
      description="Run sync, callback-style and deferred-returning functions "
                  "through one completion callback",
      author="Greg Hazel and Steven Hazel",
      author_email="sah@awesame.org",
      maintainer="Steven Hazel",
      maintainer_email="sah@awesame.org",
      packages=['runasync',
                'runasync.stack',
                'runasync.asyncio_stack',
                'runasync.twisted_stack',
                'runasync.tornado_stack'],
      python_requires='>=3.8',
      install_requires=['twisted>=21.2'],
      extras_require={'tornado': ['tornado>=6'],
                      'test': ['pytest', 'tornado>=6']},
      license='MIT'
      )

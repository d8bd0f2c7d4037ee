from setuptools import setup

setup(
  name='hypermedia-uritemplate',
  version='1.0.0',
  description='Partially expandable URI templates for hypermedia links',
  license='Apache License 2.0',
  keywords='uri-template hypermedia rest python',
  platforms='Posix',
  python_requires='>=3.6',
  install_requires=[
    'attrs>=19.1.0',
  ],
  extras_require={
    'test': ['pytest'],
  },
  classifiers=[
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: Apache Software License',
    'Programming Language :: Python :: 3'
  ],
  packages=[
    'hypermedia',
    'hypermedia.uritemplate',
  ],
  entry_points={'console_scripts': [
    'hypermedia-uri-template=hypermedia.uritemplate.scripts:main',
  ]}
)

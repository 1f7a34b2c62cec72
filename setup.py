"""ffpoly setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install for development: pip install -e .[test]
"""

from setuptools import setup
import ffpoly

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='ffpoly',
    version=ffpoly.__version__,
    description='ffpoly -- Exact arithmetic over finite fields and their polynomials',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite fields', 'Galois fields', 'polynomials', 'interpolation',
              'Reed-Solomon decoding', 'Berlekamp-Welch', 'extended Euclidean algorithm'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=ffpoly.__license__,
    packages=['ffpoly'],
    platforms=['any'],
    install_requires=['gmpy2', 'numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.9'
)

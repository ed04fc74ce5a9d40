""" A few well known befunge programs. """

hello_world = """\
"!dlroW olleH">:#,_@
"""

# Computes 5! by keeping the counter in cell (0, 0):
factorial = """\
15>:00p*00g1-:v
  ^           _$.@
"""

quine = """01->1# +# :# 0# g# ,# :# 5# 8# *# 4# +# -# _@"""


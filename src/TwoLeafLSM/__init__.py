from TwoLeafLSM.Utils import ConvertUnits, Constants

conv = ConvertUnits()  # unit converter
cst = Constants()  # general constants

from prufertools.decode import decode_tree
from prufertools.io.sequence import format_father_code
from prufertools.viz.draw import draw_tree

if __name__ == "__main__":
    seq = [3, 3, 3, 4]  # replace
    tree = decode_tree(seq)
    print(format_father_code(tree.edges))
    draw_tree(tree, save_path="prufer_tree.png")

from src.balancedtree.structures.avl_tree import AVLTree
from src.balancedtree.events.tree_events import TreeEventLog

VALUES = ["d", "b", "g", "c", "e", "a", "h", "f", "i", "j", "k", "l"]
DATA = ["delta", "bravo", "golf", "charlie", "echo", "alpha", "hotel", "foxtrot", "india", "juliett", "kilo", "lima"]

def run_demo(verbose: bool = True) -> AVLTree:
    """
    Monta a árvore de exemplo mostrando a estrutura após cada inserção
    e, no final, os pares em ordem.
    """
    events = TreeEventLog(verbose=verbose)
    tree = AVLTree(observer=events)

    for value, data in zip(VALUES, DATA):
        tree.insert(value, data)
        if verbose:
            print(tree.dump())
            print()

    if verbose:
        pairs = " | ".join(f"{key}: {data}" for key, data in tree.items())
        print(f"Valores ordenados: | {pairs} |")
        print(f"Rotações realizadas: {events.rotation_count()}")

    return tree

if __name__ == "__main__":
    run_demo()
